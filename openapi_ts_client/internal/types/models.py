import json
from typing import Any, Dict, Iterator, List, Optional, Union

from pydantic import BaseModel

from ..utils.naming import property_name

INDENT = "    "


def _indent(text: str, level: int = 1) -> str:
    prefix = INDENT * level
    return "\n".join(prefix + line if line else line for line in text.split("\n"))


class TypeNode(BaseModel):
    """Описание TypeScript типа"""

    def render(self, indent: int = 0) -> str:
        raise NotImplementedError

    def references(self) -> Iterator["TypeReference"]:
        return iter(())

    def __str__(self) -> str:
        return self.render()


class KeywordType(TypeNode):
    name: str

    def render(self, indent: int = 0) -> str:
        return self.name


class LiteralType(TypeNode):
    value: str

    def render(self, indent: int = 0) -> str:
        return json.dumps(self.value)


class TypeReference(TypeNode):
    name: str
    namespace: Optional[str] = None
    type_arguments: List[TypeNode] = []

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name

    def render(self, indent: int = 0) -> str:
        if not self.type_arguments:
            return self.qualified_name

        arguments = ", ".join(arg.render(indent) for arg in self.type_arguments)
        return f"{self.qualified_name}<{arguments}>"

    def references(self) -> Iterator["TypeReference"]:
        yield self
        for argument in self.type_arguments:
            yield from argument.references()


class ArrayType(TypeNode):
    element: TypeNode

    def render(self, indent: int = 0) -> str:
        element = self.element.render(indent)
        if isinstance(self.element, (UnionType, IntersectionType)):
            element = f"({element})"
        return f"{element}[]"

    def references(self) -> Iterator["TypeReference"]:
        return self.element.references()


class UnionType(TypeNode):
    members: List[TypeNode] = []

    def render(self, indent: int = 0) -> str:
        if not self.members:
            return "never"
        return " | ".join(member.render(indent) for member in self.members)

    def references(self) -> Iterator["TypeReference"]:
        for member in self.members:
            yield from member.references()


class IntersectionType(TypeNode):
    members: List[TypeNode] = []

    def render(self, indent: int = 0) -> str:
        if not self.members:
            return "unknown"

        rendered = []
        for member in self.members:
            text = member.render(indent)
            if isinstance(member, UnionType) and len(member.members) > 1:
                text = f"({text})"
            rendered.append(text)
        return " & ".join(rendered)

    def references(self) -> Iterator["TypeReference"]:
        for member in self.members:
            yield from member.references()


class PropertySignature(BaseModel):
    name: str
    type: TypeNode
    optional: bool = False

    def render(self, indent: int = 0) -> str:
        question = "?" if self.optional else ""
        return f"{property_name(self.name)}{question}: {self.type.render(indent)};"


class TypeLiteral(TypeNode):
    """Структурный тип-запись `{ a: T; b?: U; }`"""

    members: List[PropertySignature] = []

    def render(self, indent: int = 0) -> str:
        if not self.members:
            return "{}"

        lines = ["{"]
        for member in self.members:
            lines.append(INDENT * (indent + 1) + member.render(indent + 1))
        lines.append(INDENT * indent + "}")
        return "\n".join(lines)

    def references(self) -> Iterator["TypeReference"]:
        for member in self.members:
            yield from member.type.references()


# Объявления


class Import(BaseModel):
    alias: str
    module: str

    def __str__(self) -> str:
        return f"import * as {self.alias} from {json.dumps(self.module)};"


class TypeAlias(BaseModel):
    name: str
    type: TypeNode
    exported: bool = True

    def references(self) -> Iterator[TypeReference]:
        return self.type.references()

    def __str__(self) -> str:
        export = "export " if self.exported else ""
        return f"{export}type {self.name} = {self.type.render()};"


class Parameter(BaseModel):
    name: str
    var_type: TypeNode
    optional: bool = False

    def __str__(self) -> str:
        question = "?" if self.optional else ""
        return f"{self.name}{question}: {self.var_type.render()}"


class CodeBlock(BaseModel):
    order: int = 0
    code: str = ""

    def references(self) -> Iterator[TypeReference]:
        return iter(())

    def __str__(self) -> str:
        return self.code.replace("\t", INDENT)


class DispatchCall(BaseModel):
    """Вызов общего метода `performRequest` из тела метода клиента"""

    http_method: str
    path: str
    path_params: Optional[str] = None
    header_params: Optional[str] = None
    query_params: Optional[str] = None
    body: Optional[str] = None
    response_schemas: Dict[str, Any] = {}
    result_type: TypeNode

    def arguments(self) -> List[str]:
        return [
            json.dumps(self.http_method),
            json.dumps(self.path),
            self.path_params or "{}",
            self.header_params or "{}",
            self.query_params or "{}",
            self.body or "null",
            json.dumps(self.response_schemas),
        ]

    def references(self) -> Iterator[TypeReference]:
        return self.result_type.references()

    def __str__(self) -> str:
        arguments = ",\n".join(INDENT + argument for argument in self.arguments())
        return (
            "return this.performRequest(\n"
            + arguments
            + f"\n).then(response => response as {self.result_type.render()});"
        )


class Method(BaseModel):
    name: str
    parameters: List[Parameter] = []
    return_type: TypeNode
    body: Union[DispatchCall, CodeBlock]

    description: Optional[str] = None
    deprecated: bool = False

    def references(self) -> Iterator[TypeReference]:
        for parameter in self.parameters:
            yield from parameter.var_type.references()
        yield from self.return_type.references()
        yield from self.body.references()

    def _docblock(self) -> str:
        lines = []
        if self.description:
            # "*/" внутри текста закрыл бы комментарий
            lines.extend(self.description.strip().replace("*/", "*\\/").splitlines())
        if self.deprecated:
            if lines:
                lines.append("")
            lines.append("@deprecated")
        if not lines:
            return ""

        return (
            "/**\n"
            + "\n".join(f" * {line}".rstrip() for line in lines)
            + "\n */\n"
        )

    def __str__(self) -> str:
        parameters = ", ".join(map(str, self.parameters))
        return (
            self._docblock()
            + f"{property_name(self.name)}({parameters}): {self.return_type.render()} {{\n"
            + _indent(str(self.body))
            + "\n}"
        )


class Field(BaseModel):
    name: str
    type: TypeNode
    initializer: Optional[str] = None
    readonly: bool = True

    def __str__(self) -> str:
        readonly = "readonly " if self.readonly else ""
        initializer = f" = {self.initializer}" if self.initializer is not None else ""
        return f"{readonly}{self.name}: {self.type.render()}{initializer};"


class Class(BaseModel):
    name: str
    exported: bool = True

    fields: List[Field] = []
    code_blocks: List[CodeBlock] = []
    methods: List[Method] = []

    def add_method(self, method: Method) -> Method:
        self.methods.append(method)
        return method

    def references(self) -> Iterator[TypeReference]:
        for field in self.fields:
            yield from field.type.references()
        for method in self.methods:
            yield from method.references()

    def __str__(self) -> str:
        sections = []
        if self.fields:
            sections.append("\n".join(map(str, self.fields)))
        sections.extend(
            str(block)
            for block in sorted(self.code_blocks, key=lambda x: x.order, reverse=True)
        )
        sections.extend(map(str, self.methods))

        export = "export " if self.exported else ""
        body = _indent("\n\n".join(sections)) if sections else ""
        return f"{export}class {self.name} {{\n{body}\n}}"


Statement = Union[TypeAlias, Class, CodeBlock]


class CodeFile(BaseModel):
    file_name: str

    header: Optional[str] = None
    imports: List[Import] = []
    statements: List[Statement] = []

    def add_statement(self, statement: Statement) -> Statement:
        self.statements.append(statement)
        return statement

    def add_code_block(self, code_block: Union[CodeBlock, str], **kwargs) -> CodeBlock:
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block, **kwargs)

        self.statements.append(code_block)
        return code_block

    def references(self) -> Iterator[TypeReference]:
        for statement in self.statements:
            yield from statement.references()

    def __str__(self) -> str:
        parts = [
            self.header or "",
            "\n".join(map(str, self.imports)),
            "\n\n".join(map(str, self.statements)),
        ]
        return "\n\n".join(filter(bool, parts)) + "\n"


class Project(BaseModel):
    name: str
    files: List[CodeFile] = []

    def add_file(self, code_file: CodeFile) -> CodeFile:
        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None
