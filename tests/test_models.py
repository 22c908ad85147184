from pathlib import PurePosixPath

import pytest
from pydantic import ValidationError

from apollo.core.errors import NoHomeEnvironmentVar
from apollo.core.runtime import ApolloLayout, resolve_layout


def test_resolve_layout_paths():
    layout = resolve_layout(lambda: PurePosixPath("/home/alice"))
    assert layout.home == PurePosixPath("/home/alice/.apollo")
    assert layout.bin == PurePosixPath("/home/alice/.apollo/bin")


def test_layout_json_dump():
    layout = resolve_layout(lambda: PurePosixPath("/home/alice"))
    assert layout.model_dump(mode="json") == {
        "home": "/home/alice/.apollo",
        "bin": "/home/alice/.apollo/bin",
    }


def test_layout_is_frozen():
    layout = resolve_layout(lambda: PurePosixPath("/home/alice"))
    with pytest.raises(ValidationError):
        layout.home = PurePosixPath("/tmp")


def test_resolve_layout_without_home():
    with pytest.raises(NoHomeEnvironmentVar):
        resolve_layout(lambda: None)


def test_resolve_layout_default_provider(fake_home):
    assert resolve_layout() == ApolloLayout(
        home=fake_home / ".apollo",
        bin=fake_home / ".apollo" / "bin",
    )
