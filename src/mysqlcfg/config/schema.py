"""Configuration schema for the mysqlcfg command-line tool."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class MySQLSettings(BaseModel):
    """Connection settings that complement the credential environment variables."""

    host: Optional[str] = Field(
        default=None,
        description="MySQL server hostname (localhost when unset)",
    )
    port: Optional[str] = Field(
        default=None,
        description="MySQL server port (33060 when unset)",
    )
    database: str = Field(
        default="",
        description="Database name; empty for a server-level connection",
    )
    logging: bool = Field(
        default=False,
        description="Echo SQL statements issued through opened engines",
    )

    @field_validator("port", mode="before")
    @classmethod
    def port_as_text(cls, value):
        """Accept unquoted YAML ports such as ``port: 3306``."""
        if value is None or isinstance(value, str):
            return value
        return str(value)


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format"
    )
    file: Optional[str] = Field(
        default=None,
        description="Optional log file path; messages always go to stderr",
    )


class MysqlcfgConfig(BaseModel):
    """Main mysqlcfg configuration schema."""

    mysql: MySQLSettings = Field(default_factory=MySQLSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    class Config:
        """Pydantic configuration."""
        extra = "forbid"
        validate_assignment = True
