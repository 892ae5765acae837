"""
Модели OpenAPI v3 документа

Документ разбирается один раз и дальше только читается. Узел схемы - это либо
ссылка ($ref), либо конкретная схема, но никогда не оба сразу.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

COMPONENT_CATEGORIES = ("schemas", "parameters", "requestBodies", "responses")


class Reference(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ref: str = Field(alias="$ref")


def _reference_or(concrete_tag: str):
    def discriminate(value: Any) -> str:
        if isinstance(value, dict):
            return "reference" if "$ref" in value else concrete_tag
        return "reference" if isinstance(value, Reference) else concrete_tag

    return discriminate


def ReferenceOr(model: Any, tag: str) -> Any:
    """Тип-объединение `Reference | model` с выбором варианта по наличию $ref"""
    return Annotated[
        Union[
            Annotated[Reference, Tag("reference")],
            Annotated[model, Tag(tag)],
        ],
        Discriminator(_reference_or(tag)),
    ]


class SchemaObject(BaseModel):
    # Остальные ключевые слова (minimum, pattern, ...) сохраняются для JSON Schema
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: Optional[Union[str, List[str]]] = None
    format: Optional[str] = None
    description: Optional[str] = None
    enum: Optional[List[Any]] = None
    nullable: Optional[bool] = None

    properties: Optional[Dict[str, "OAObject"]] = None
    required: Optional[List[str]] = None

    all_of: Optional[List["OAObject"]] = Field(default=None, alias="allOf")
    one_of: Optional[List["OAObject"]] = Field(default=None, alias="oneOf")
    any_of: Optional[List["OAObject"]] = Field(default=None, alias="anyOf")

    items: Optional["OAObject"] = None
    unique_items: Optional[bool] = Field(default=None, alias="uniqueItems")


OAObject = ReferenceOr(SchemaObject, "schema")

SchemaObject.model_rebuild()


class Parameter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    in_: Literal["path", "query", "header", "cookie"] = Field(alias="in")
    description: Optional[str] = None
    required: bool = False
    deprecated: bool = False
    schema_: Optional[OAObject] = Field(default=None, alias="schema")


class MediaType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: Optional[OAObject] = Field(default=None, alias="schema")


class RequestBody(BaseModel):
    description: Optional[str] = None
    required: bool = False
    content: Dict[str, MediaType] = {}


class Response(BaseModel):
    description: Optional[str] = None
    content: Optional[Dict[str, MediaType]] = None


class Operation(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    operation_id: Optional[str] = Field(default=None, alias="operationId")
    summary: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = []
    deprecated: bool = False

    parameters: List[ReferenceOr(Parameter, "parameter")] = []
    request_body: Optional[ReferenceOr(RequestBody, "requestBody")] = Field(
        default=None, alias="requestBody"
    )
    responses: Dict[str, ReferenceOr(Response, "response")] = {}


# Порядок важен: методы клиента генерируются именно в нем
HTTP_METHODS = ("get", "put", "post", "patch", "delete")


class PathItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ref: Optional[str] = Field(default=None, alias="$ref")
    summary: Optional[str] = None
    parameters: List[ReferenceOr(Parameter, "parameter")] = []

    get: Optional[Operation] = None
    put: Optional[Operation] = None
    post: Optional[Operation] = None
    patch: Optional[Operation] = None
    delete: Optional[Operation] = None

    def operations(self) -> List[Tuple[str, Operation]]:
        """Объявленные операции в порядке GET, PUT, POST, PATCH, DELETE"""
        return [
            (method.upper(), getattr(self, method))
            for method in HTTP_METHODS
            if getattr(self, method) is not None
        ]


class Components(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schemas: Dict[str, OAObject] = {}
    parameters: Dict[str, ReferenceOr(Parameter, "parameter")] = {}
    request_bodies: Dict[str, ReferenceOr(RequestBody, "requestBody")] = Field(
        default={}, alias="requestBodies"
    )
    responses: Dict[str, ReferenceOr(Response, "response")] = {}


class Server(BaseModel):
    url: str


class TagObject(BaseModel):
    name: str


class Document(BaseModel):
    openapi: str
    servers: List[Server] = []
    paths: Dict[str, PathItem] = {}
    components: Components = Components()
    tags: List[TagObject] = []


# Разыменованные компоненты: ссылок внутри уже нет, вложенные схемы
# остаются "сырыми" (и могут быть циклическими), поэтому типизируем неглубоко


class ResolvedMediaType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schema_: Any = Field(default=None, alias="schema")


class ResolvedParameter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    in_: Literal["path", "query", "header", "cookie"] = Field(alias="in")
    required: bool = False
    schema_: Any = Field(default=None, alias="schema")


class ResolvedRequestBody(BaseModel):
    required: bool = False
    content: Dict[str, ResolvedMediaType] = {}


class ResolvedResponse(BaseModel):
    content: Optional[Dict[str, ResolvedMediaType]] = None


class ResolvedComponents(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    schemas: Dict[str, Any] = {}
    parameters: Dict[str, ResolvedParameter] = {}
    request_bodies: Dict[str, ResolvedRequestBody] = Field(
        default={}, alias="requestBodies"
    )
    responses: Dict[str, ResolvedResponse] = {}

    def table(self, category: str) -> Dict[str, Any]:
        return {
            "schemas": self.schemas,
            "parameters": self.parameters,
            "requestBodies": self.request_bodies,
            "responses": self.responses,
        }[category]
