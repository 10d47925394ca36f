import json
from typing import Any

from fastapi.responses import JSONResponse

from bookapi.enums import ErrorKind
from bookapi.errors import BookApiError

STATUS_BY_ERROR = {
    ErrorKind.invalid_input: 400,
    ErrorKind.not_found: 404,
    ErrorKind.storage_failure: 500,
}


class PrettyJSONResponse(JSONResponse):
    indent = 2

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=self.indent).encode("utf-8")


def error_response(error: BookApiError) -> PrettyJSONResponse:
    payload = error.to_response().model_dump(mode="json", exclude_none=True)
    return PrettyJSONResponse(status_code=STATUS_BY_ERROR[error.kind], content=payload)
