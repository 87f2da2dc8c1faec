from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated

DEFAULT_CONFIG_FILE = "jarc.json"
DEFAULT_PROJECT_NAME = "mi-app-jarc"
DEFAULT_WEB_DIR = "www"

# Reverse-domain package identifier, at least two segments (eg. com.example.app)
APP_ID_PATTERN = r"^[a-zA-Z_][a-zA-Z0-9_]*(\.[a-zA-Z_][a-zA-Z0-9_]*)+$"


class _StrictModel(BaseModel):
    """
    Pydantic parser configuration options.
    """

    model_config = ConfigDict(
        extra="forbid",
    )


class Platform(str, Enum):
    """
    Supported native platforms.
    """

    ANDROID = "android"
    IOS = "ios"

    @classmethod
    def parse(cls, value: Optional[str], default: "Platform" = None) -> "Platform":
        """
        Parse a platform name given on the command line.

        Unknown or missing values fall back to `default` (Android if not set).

        :param value: Platform name as typed by the user (case-insensitive).
        :param default: Platform to use if the value isn't recognized.
        :return: Platform enum member.
        """
        if default is None:
            default = cls.ANDROID
        if not value:
            return default
        try:
            return cls(value.strip().lower())
        except ValueError:
            return default


class UIAdapter(str, Enum):
    """
    Supported UI adapters.
    """

    PLAIN = "plain"
    VIRTUAL = "virtual"


class LogConfig(_StrictModel):
    """
    Configuration for logging.
    """

    level: str = Field(
        "WARNING",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    format: str = Field(
        "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        description="Logging format",
    )
    output: Optional[str] = Field(
        None,
        description="Output file for logs (if not specified, logs are printed to stderr)",
    )


class BridgeConfig(_StrictModel):
    """
    External tools used to build the hybrid project.

    The commands are run through the shell, in the project root directory.
    """

    package_manager: str = Field(
        "npm",
        description="Package manager used to initialize the manifest and install packages",
    )
    bridge_cli: str = Field(
        "npx cap",
        description="Command invoking the native bridge CLI",
    )
    core_packages: list[str] = Field(
        ["@capacitor/cli", "@capacitor/core"],
        description="Native bridge packages installed in every project",
    )
    platform_package_prefix: str = Field(
        "@capacitor/",
        description="Prefix of the per-platform native bridge package (the platform name is appended)",
    )
    web_dir: str = Field(
        DEFAULT_WEB_DIR,
        description="Name of the web asset directory, relative to the project root",
    )

    @field_validator("package_manager", "bridge_cli", "web_dir")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value must not be empty")
        return v.strip()

    def platform_package(self, platform: Platform) -> str:
        """Name of the native bridge package for the given platform."""
        return f"{self.platform_package_prefix}{platform.value}"


class PluginConfig(_StrictModel):
    """
    A plugin offered in the project creation wizard.
    """

    name: str = Field(description="Human-readable plugin name")
    package: str = Field(description="Package to install")


DEFAULT_PLUGINS = [
    PluginConfig(name="Camera", package="@capacitor/camera"),
    PluginConfig(name="Filesystem", package="@capacitor/filesystem"),
    PluginConfig(name="Geolocation", package="@capacitor/geolocation"),
    PluginConfig(name="Splash Screen", package="@capacitor/splash-screen"),
    PluginConfig(name="Status Bar", package="@capacitor/status-bar"),
]


class PlainUIConfig(_StrictModel):
    """
    Configuration for plaintext console UI.
    """

    type: Literal[UIAdapter.PLAIN] = UIAdapter.PLAIN


class VirtualUIConfig(_StrictModel):
    """
    Configuration for the virtual UI.

    Inputs are replayed in order as answers to the wizard questions.
    """

    type: Literal[UIAdapter.VIRTUAL] = UIAdapter.VIRTUAL
    inputs: list[Any]


UIConfig = Annotated[
    Union[PlainUIConfig, VirtualUIConfig],
    Field(discriminator="type"),
]


class Config(_StrictModel):
    """
    JARC configuration
    """

    log: LogConfig = LogConfig()
    bridge: BridgeConfig = BridgeConfig()
    plugins: list[PluginConfig] = Field(
        default=DEFAULT_PLUGINS,
        description="Plugins offered in the project creation wizard",
    )
    ui: UIConfig = PlainUIConfig()

    @field_validator("plugins")
    @classmethod
    def validate_unique_plugins(cls, v: list[PluginConfig]) -> list[PluginConfig]:
        packages = [p.package for p in v]
        if len(packages) != len(set(packages)):
            raise ValueError("Plugin packages must be unique")
        return v


class ConfigLoader:
    """
    Configuration loader takes care of loading and parsing configuration files.

    The default loader is already initialized as `jarc.config.loader`. To
    load the configuration from a file, use `jarc.config.loader.load(path)`.

    To get the current configuration, use `jarc.config.get_config()`.
    """

    config: Config
    config_path: Optional[str]

    def __init__(self):
        self.config_path = None
        self.config = Config()

    @staticmethod
    def _remove_json_comments(json_str: str) -> str:
        """
        Remove comments from a JSON string.

        Removes all lines that start with "//" from the JSON string.

        :param json_str: JSON string with comments.
        :return: JSON string without comments.
        """
        return "\n".join([line for line in json_str.splitlines() if not line.strip().startswith("//")])

    @classmethod
    def from_json(cls: "ConfigLoader", config: str) -> Config:
        """
        Parse JSON Into a Config object.

        :param config: JSON string to parse.
        :return: Config object.
        """
        return Config.model_validate_json(cls._remove_json_comments(config), strict=True)

    def load(self, path: str) -> Config:
        """
        Load a configuration from a file.

        :param path: Path to the configuration file.
        :return: Config object.
        """
        with open(path, "rb") as f:
            raw_config = f.read()

        if b"\x00" in raw_config:
            encoding = "utf-16"
        else:
            encoding = "utf-8-sig"

        text_config = raw_config.decode(encoding)
        self.config = self.from_json(text_config)
        self.config_path = path
        return self.config


loader = ConfigLoader()


def get_config() -> Config:
    """
    Return current configuration.

    :return: Current configuration object.
    """
    return loader.config


__all__ = ["loader", "get_config"]
