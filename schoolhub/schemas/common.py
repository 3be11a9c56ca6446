from pydantic import AfterValidator, AnyUrl, BaseModel, TypeAdapter, ValidationError
from typing import Annotated

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # keep the caller's string as-is, AnyUrl would normalise it
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid URL")
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]


class SuccessResponse(BaseModel):
    success: bool = True
