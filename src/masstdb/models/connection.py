"""
Connection specification model.

Describes how to reach one database. Instances are immutable once built; the
connector that receives one owns it for its whole lifetime.
"""

from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .engine import EngineType, default_port


class ConnectionSpec(BaseModel):
    """Connection parameters for a database."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(default="", description="Database type: postgres, mysql, mongodb, sqlite")
    host: str = Field(default="", description="Database host (unused for sqlite)")
    port: int = Field(default=0, description="Database port, 0 means the engine default")
    username: str = Field(default="", description="Database username")
    password: str = Field(default="", repr=False, description="Database password")
    database: str = Field(
        default="", description="Database name, or the database file path for sqlite"
    )

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is in valid range."""
        if not 0 <= v <= 65535:
            raise ValueError("Port must be between 0 and 65535")
        return v

    @property
    def resolved_port(self) -> int:
        """Port to connect to, falling back to the engine default."""
        return self.port or default_port(self.type)

    def with_default_port(self) -> "ConnectionSpec":
        """Return a copy with the engine default port filled in."""
        if self.port:
            return self
        return self.model_copy(update={"port": self.resolved_port})

    def connection_string(self) -> str:
        """Generate a connection string for engines whose clients take one."""
        if self.type == EngineType.MONGODB.value:
            port = self.resolved_port
            if self.username:
                user = quote_plus(self.username)
                passwd = quote_plus(self.password)
                return f"mongodb://{user}:{passwd}@{self.host}:{port}/{self.database}"
            return f"mongodb://{self.host}:{port}/{self.database}"
        elif self.type == EngineType.SQLITE.value:
            return self.database
        return ""
