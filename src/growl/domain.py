from dataclasses import dataclass, field
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class EnvVar(BaseModel):
    name: str
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _scalar_to_str(cls, v):
        # YAML turns `value: 1` or `value: true` into non-strings
        if v is None:
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        return str(v)


class CommandDefinition(BaseModel):
    name: str = Field(description="Name used on the command line")
    command: str = Field(description="Primary command line")
    extra: List[str] = Field(default_factory=list, description="Lines run after `command`, in order")
    env: List[EnvVar] = Field(default_factory=list, description="Command-scoped environment")

    @field_validator("extra", "env", mode="before")
    @classmethod
    def _null_to_list(cls, v):
        # `extra:` with no items is null in YAML
        return [] if v is None else v

    def lines(self) -> List[str]:
        return [self.command] + list(self.extra)


class Config(BaseModel):
    shell: Optional[str] = None
    env: List[EnvVar] = Field(default_factory=list)
    commands: List[CommandDefinition] = Field(default_factory=list)

    @field_validator("env", "commands", mode="before")
    @classmethod
    def _null_to_list(cls, v):
        return [] if v is None else v

    def find(self, name: str) -> Optional[CommandDefinition]:
        return next((c for c in self.commands if c.name == name), None)


@dataclass
class CrossOptions:
    os: str
    arch: str
    ldflags: str = ""
    out: str = ""
    static: bool = False
    light: bool = False
    noconsole: bool = False
    cgo: bool = False
    build_args: List[str] = field(default_factory=list)
