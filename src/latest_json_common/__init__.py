"""Shared helpers for tauri-latest-json (latest_json_common).

File IO, environment access, tool paths and layered configuration used by both
the core library and the CLI.
"""
