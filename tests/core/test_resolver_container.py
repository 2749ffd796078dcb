from __future__ import annotations

import pytest
from pydantic import ValidationError

from voyagerprofile.adapters import VoyagerHTTPTransport
from voyagerprofile.container import create_container
from voyagerprofile.core import ProfileResolver
from voyagerprofile.schemas import AppConfig, load_config


def test_create_container_defaults():
    container = create_container()

    resolver = container.resolver()

    assert isinstance(resolver, ProfileResolver)
    assert resolver._strict is False
    assert isinstance(container.transport(), VoyagerHTTPTransport)


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "contract": {"skills_field": "*skillsV2"},
            "resolver": {"strict_references": True},
            "transport": {"base_url": "https://voyager.test/api", "timeout": 3.0},
        }
    )

    resolver = container.resolver()
    transport = container.transport()

    assert resolver._contract.skills_field == "*skillsV2"
    assert resolver._strict is True
    assert transport._config.base_url == "https://voyager.test/api"
    assert transport._config.timeout == 3.0


def test_load_config_validation():
    data = {
        "contract": {"mini_profile_urn_prefix": "urn:li:fsd_profile:"},
        "resolver": {"strict_references": True},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["contract"] == {"mini_profile_urn_prefix": "urn:li:fsd_profile:"}
    assert settings["resolver"] == {"strict_references": True}
    assert "transport" not in settings


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])


def test_load_config_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        load_config({"contract": {"no_such_field": "x"}})
