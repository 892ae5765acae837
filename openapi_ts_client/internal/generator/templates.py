class Templates:
    """Шаблоны TypeScript кода, общие для всех генерируемых клиентов"""

    header = """/**
 * DO NOT MODIFY - This file has been generated using openapi-ts-client.
 */
/* eslint-disable */"""

    empty_export = "export {};"

    client_preamble = """import { URL } from "url";
import fetch from "node-fetch";
import { Schema, Validator } from "jsonschema";

type Parameter = number | boolean | string | undefined;
type ResponseSchemas = { [statusCode: string]: Schema };

export class ResponseValidationError extends Error {
    readonly status: number;
    readonly body: string;

    constructor(status: number, body: string, message: string) {
        super(`${message}\\nStatus: ${status}\\nBody:\\n${body}`);
        this.name = "ResponseValidationError";
        this.status = status;
        this.body = body;
    }
}"""

    constructor = """constructor(baseUrl?: string) {
    if (baseUrl !== undefined) this.baseUrl = baseUrl;
}"""

    remove_nulls = """removeNulls(instance: { [key: string]: unknown }, property: string): void {
    const value = instance[property];
    if (value === null || typeof value === "undefined") {
        delete instance[property];
    }
}"""

    perform_request = """performRequest(
    method: string,
    path: string,
    pathParams: { [key: string]: Parameter },
    headerParams: { [key: string]: Parameter },
    queryParams: { [key: string]: Parameter },
    body: unknown,
    responseSchemas: ResponseSchemas,
): Promise<unknown> {
    const requestUrl = new URL(this.baseUrl);

    const replacedPath = Object.entries(pathParams).reduce((url, [paramKey, paramValue]) => {
        return paramValue !== undefined ? url.replace(`{${paramKey}}`, encodeURIComponent(paramValue.toString())) : url;
    }, path);

    requestUrl.pathname = requestUrl.pathname.replace(/\\/$/, "") + replacedPath;

    Object.entries(queryParams).forEach(([queryParamKey, queryParamValue]) => {
        if (queryParamValue !== undefined) requestUrl.searchParams.append(queryParamKey, queryParamValue.toString());
    });

    const headers: { [key: string]: string } = {};
    Object.entries(headerParams).forEach(([headerName, headerValue]) => {
        if (headerValue !== undefined) headers[headerName] = headerValue.toString();
    });

    const bodyParam = body !== null ? { body: JSON.stringify(body) } : {};
    if (body !== null && headers["Content-Type"] === undefined) {
        headers["Content-Type"] = "application/json";
    }

    return fetch(requestUrl.toString(), {
        method,
        headers,
        ...bodyParam,
    }).then(async response => {
        const responseText = await response.text();
        const responseJson = responseText.length > 0 ? JSON.parse(responseText) : null;

        const status = response.status.toString();
        const kind = status in responseSchemas ? status : "default";
        const responseSchema: Schema | undefined = responseSchemas[kind];
        if (responseSchema === undefined) {
            throw new ResponseValidationError(
                response.status,
                responseText,
                `Response status ${response.status} does not have a schema defined.`,
            );
        }

        const validationOptions = { allowUnknownAttributes: true, preValidateProperty: this.removeNulls };
        const validationResult = this.validator.validate(responseJson, responseSchema, validationOptions);
        if (!validationResult.valid) {
            throw new ResponseValidationError(
                response.status,
                responseText,
                `Failed to validate schema of response with status ${response.status}: ${validationResult.errors.map(error => error.stack).join("; ")}`,
            );
        }

        return { kind, value: responseJson };
    });
}"""


templates = Templates()
