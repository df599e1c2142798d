"""Verify package imports work correctly."""


def test_import_strscan() -> None:
    """Test that strscan can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import strscan

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert strscan.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from strscan import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    import strscan

    for name in strscan.__all__:
        assert hasattr(strscan, name), name
