"""Read the layered ``greetkit`` configuration.

Layers, lowest precedence first: the bundled ``defaultconfig.toml``, the app,
host and user config files, a ``.env`` file, then ``GREETKIT___*``
environment variables. lib_layered_config resolves the platform paths from
the vendor, app and slug names in ``__init__conf__``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from greetkit import __init__conf__


def get_default_config_path() -> Path:
    """Return the bundled defaults file shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load and cache the merged configuration.

    The result is cached per ``(profile, start_dir)`` for the life of the
    process; tests call ``get_config.cache_clear()`` to force a re-read.

    Args:
        profile: Optional profile name. Inserts ``profile/<name>/`` into every
            file path, e.g. ``~/.config/greetkit/profile/staging/config.toml``.
        start_dir: Directory where ``.env`` discovery starts. Defaults to the
            working directory.

    Raises:
        ValueError: If ``profile`` is empty, longer than
            ``DEFAULT_MAX_PROFILE_LENGTH`` or contains path characters.

    Example:
        >>> get_config().get("holidays.base_url")
        'https://date.nager.at/api/v2'
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
]
