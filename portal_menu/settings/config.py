from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    env: str = Field(default="dev")
    log_level: str = Field(default="INFO")

    # Portal bootstrap
    active_portal: str = Field(default="admin")
    # JSON dump of the file-based router output; one file per portal build.
    route_table_path: Optional[str] = Field(default=None)

    # Menu composition
    menu_resolution_mode: Literal["lenient", "strict"] = Field(default="lenient")
    menu_empty_group_policy: Literal["keep", "remove"] = Field(default="keep")
    menu_join_parent_paths: bool = Field(default=False)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
