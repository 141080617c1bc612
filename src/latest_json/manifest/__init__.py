"""Platform keys, manifest generation and persistence."""

from latest_json.manifest.generator import (
    VERSION_PLACEHOLDERS,
    apply_version_placeholder,
    build_download_url,
    format_pub_date,
    generate_manifest,
)
from latest_json.manifest.keys import (
    UNIVERSAL_DARWIN_KEYS,
    basic_key,
    extended_key,
    get_platform_keys,
)
from latest_json.manifest.store import (
    MANIFEST_FILE_NAME,
    load_existing_manifest,
    manifest_path,
    write_manifest,
)

__all__ = [
    "MANIFEST_FILE_NAME",
    "UNIVERSAL_DARWIN_KEYS",
    "VERSION_PLACEHOLDERS",
    "apply_version_placeholder",
    "basic_key",
    "build_download_url",
    "extended_key",
    "format_pub_date",
    "generate_manifest",
    "get_platform_keys",
    "load_existing_manifest",
    "manifest_path",
    "write_manifest",
]
