"""Environment variable configuration for the arXiv MCP server.

Settings are loaded in priority order:
  1. Shell environment variables (highest priority)
  2. .env file in current directory
  3. ~/.arxiv-mcp/.env (persistent config, set via `arxiv-mcp env set`)

Run `arxiv-mcp env` to see which settings are configured.
Run `arxiv-mcp env set KEY value` to save a setting persistently.

Known settings:
    ARXIV_API_URL        ->  arXiv export API endpoint
    ARXIV_TIMEOUT        ->  request timeout in seconds (transport default if unset)
    ARXIV_MCP_LOG_LEVEL  ->  logging level (default WARNING)
    MCP_TRANSPORT        ->  stdio, sse or streamable-http (default stdio)
    MCP_HTTP_HOST        ->  bind host for HTTP transports
    MCP_HTTP_PORT        ->  bind port for HTTP transports
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

CONFIG_DIR = Path.home() / ".arxiv-mcp"
PERSISTENT_ENV = CONFIG_DIR / ".env"

# Load in reverse priority order (later loads don't overwrite existing)
if PERSISTENT_ENV.exists():
    load_dotenv(PERSISTENT_ENV)

load_dotenv()

DEFAULT_API_URL = "https://export.arxiv.org/api/query"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
TRANSPORTS = ("stdio", "sse", "streamable-http")


# --- Persistent config ---

def save_key(name: str, value: str) -> Path:
    """Save a setting to ~/.arxiv-mcp/.env for persistent use."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    replaced = False
    if PERSISTENT_ENV.exists():
        for line in PERSISTENT_ENV.read_text().splitlines():
            if line.startswith(f"{name}="):
                lines.append(f"{name}={value}")
                replaced = True
            else:
                lines.append(line)

    if not replaced:
        lines.append(f"{name}={value}")

    PERSISTENT_ENV.write_text("\n".join(lines) + "\n")

    # Also set in current process
    os.environ[name] = value

    return PERSISTENT_ENV


# --- Accessors ---

def get_api_url() -> str:
    return os.getenv("ARXIV_API_URL") or DEFAULT_API_URL


def get_timeout() -> float | None:
    """Request timeout in seconds, or None to keep the transport default."""
    raw = os.getenv("ARXIV_TIMEOUT", "")
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"ARXIV_TIMEOUT must be a number of seconds, got {raw!r}")
    if value <= 0:
        raise ValueError(f"ARXIV_TIMEOUT must be positive, got {raw!r}")
    return value


def get_log_level() -> str:
    return (os.getenv("ARXIV_MCP_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def get_transport() -> str:
    transport = (os.getenv("MCP_TRANSPORT") or "stdio").lower()
    if transport not in TRANSPORTS:
        raise ValueError(
            f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {transport!r}"
        )
    return transport


def get_host() -> str:
    return os.getenv("MCP_HTTP_HOST") or DEFAULT_HOST


def get_port() -> int:
    raw = os.getenv("MCP_HTTP_PORT", "")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"MCP_HTTP_PORT must be an integer, got {raw!r}")


# --- Status check ---

ENV_VARS = {
    "ARXIV_API_URL": {
        "default": DEFAULT_API_URL,
        "description": "arXiv export API endpoint",
    },
    "ARXIV_TIMEOUT": {
        "default": "transport default",
        "description": "Request timeout in seconds",
    },
    "ARXIV_MCP_LOG_LEVEL": {
        "default": DEFAULT_LOG_LEVEL,
        "description": "Logging level (logs go to stderr)",
    },
    "MCP_TRANSPORT": {
        "default": "stdio",
        "description": "MCP transport: stdio, sse or streamable-http",
    },
    "MCP_HTTP_HOST": {
        "default": DEFAULT_HOST,
        "description": "Bind host for HTTP transports",
    },
    "MCP_HTTP_PORT": {
        "default": str(DEFAULT_PORT),
        "description": "Bind port for HTTP transports",
    },
}

VALID_KEYS = set(ENV_VARS)


def check_env() -> list[tuple[str, bool, dict]]:
    """Return list of (var_name, is_set, info) for all known env vars."""
    result = []
    for var, info in ENV_VARS.items():
        is_set = bool(os.getenv(var))
        result.append((var, is_set, info))
    return result
