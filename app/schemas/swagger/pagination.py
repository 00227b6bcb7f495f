from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PaginationInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool
