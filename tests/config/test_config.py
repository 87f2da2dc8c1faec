import codecs
import json

import pytest
from pydantic import ValidationError

from jarc.config import Config, ConfigLoader, Platform, PluginConfig, UIAdapter, get_config, loader

test_config_data = {
    "log": {"level": "DEBUG"},
    "bridge": {
        "package_manager": "pnpm",
        "bridge_cli": "pnpm exec cap",
        "web_dir": "public",
    },
    "plugins": [
        {"name": "Camera", "package": "@capacitor/camera"},
        {"name": "Haptics", "package": "@capacitor/haptics"},
    ],
    "ui": {"type": "virtual", "inputs": [{"text": "myapp"}]},
}


def test_parse_config():
    config = ConfigLoader.from_json(json.dumps(test_config_data))

    assert config.log.level == "DEBUG"
    assert config.bridge.package_manager == "pnpm"
    assert config.bridge.bridge_cli == "pnpm exec cap"
    assert config.bridge.web_dir == "public"
    assert config.bridge.core_packages == ["@capacitor/cli", "@capacitor/core"]
    assert [p.name for p in config.plugins] == ["Camera", "Haptics"]
    assert config.ui.type == UIAdapter.VIRTUAL
    assert config.ui.inputs == [{"text": "myapp"}]


def test_builtin_defaults():
    config = ConfigLoader.from_json("{}")

    assert config.log.level == "WARNING"
    assert config.log.output is None
    assert config.bridge.package_manager == "npm"
    assert config.bridge.bridge_cli == "npx cap"
    assert config.bridge.web_dir == "www"
    assert config.bridge.platform_package(Platform.IOS) == "@capacitor/ios"
    assert [p.package for p in config.plugins] == [
        "@capacitor/camera",
        "@capacitor/filesystem",
        "@capacitor/geolocation",
        "@capacitor/splash-screen",
        "@capacitor/status-bar",
    ]
    assert config.ui.type == UIAdapter.PLAIN


@pytest.mark.parametrize(
    ("data", "error_loc"),
    [
        ({"log": {"level": "VERBOSE"}}, "log.level"),
        ({"bridge": {"package_manager": "  "}}, "bridge.package_manager"),
        ({"bridge": {"unknown": "x"}}, "bridge.unknown"),
        ({"ui": {"type": "web"}}, "ui"),
        ({"ui": {"type": "virtual"}}, "ui.virtual.inputs"),
    ],
)
def test_invalid_config(data, error_loc):
    with pytest.raises(ValidationError) as einfo:
        ConfigLoader.from_json(json.dumps(data))

    assert error_loc in str(einfo.value)


def test_duplicate_plugins():
    with pytest.raises(ValidationError) as einfo:
        Config(
            plugins=[
                PluginConfig(name="Camera", package="@capacitor/camera"),
                PluginConfig(name="Camera again", package="@capacitor/camera"),
            ]
        )

    assert "Plugin packages must be unique" in str(einfo.value)


def test_load_from_file_with_comments(tmp_path):
    config_path = tmp_path / "jarc.json"
    config_path.write_text(
        "\n".join(
            [
                "{",
                "  // Use pnpm instead of npm",
                '  "bridge": {"package_manager": "pnpm"}',
                "}",
            ]
        ),
        encoding="utf-8",
    )

    ldr = ConfigLoader()
    config = ldr.load(str(config_path))

    assert config.bridge.package_manager == "pnpm"
    assert ldr.config is config
    assert ldr.config_path == str(config_path)


def test_default_config():
    loader.config = Config()
    config = get_config()
    assert config.log.level == "WARNING"
    assert config.bridge.web_dir == "www"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("android", Platform.ANDROID),
        ("IOS", Platform.IOS),
        (" ios ", Platform.IOS),
        (None, Platform.ANDROID),
        ("", Platform.ANDROID),
        ("windows", Platform.ANDROID),
    ],
)
def test_platform_parse(value, expected):
    assert Platform.parse(value) == expected


def test_platform_parse_custom_default():
    assert Platform.parse("web", default=Platform.IOS) == Platform.IOS


@pytest.mark.parametrize(
    ("encoding", "bom"),
    [
        ("utf-8", None),
        ("utf-8", codecs.BOM_UTF8),
        ("utf-16", None),
        ("utf-16-le", codecs.BOM_UTF16_LE),
        ("utf-16-be", codecs.BOM_UTF16_BE),
    ],
)
def test_encodings(encoding, bom, tmp_path):
    config_json = json.dumps(test_config_data)
    config_path = tmp_path / "jarc.json"

    with open(config_path, "wb") as f:
        if bom:
            f.write(bom)
        f.write(config_json.encode(encoding))

    config = ConfigLoader().load(config_path)
    assert config.bridge.web_dir == "public"
