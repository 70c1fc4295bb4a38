"""
Poly Secret Web API — aiohttp server.

Exposes secret reconstruction and base decoding as JSON endpoints
backed by the poly_secret library.
"""

import argparse
import logging
import sys
from pathlib import Path

from aiohttp import web

# Ensure poly_secret is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from poly_secret import encoding, points, recovery


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# API handlers
# ---------------------------------------------------------------------------

async def api_reconstruct(request: web.Request) -> web.Response:
    """
    POST /api/reconstruct
    Body JSON: a share document, e.g.
        { keys: {n: int, k: int}, "1": {base: str, value: str}, ..., truncate?: bool }

    Returns: { secret, per_term_contributions, verification, points, skipped }
    """
    try:
        data = await request.json()
    except ValueError:
        return _err("Invalid JSON body", 400)

    if not isinstance(data, dict):
        return _err("Body must be a JSON object", 400)

    truncate = data.pop("truncate", False)
    if not isinstance(truncate, bool):
        return _err("truncate must be a JSON boolean", 400)

    try:
        collection = points.parse_document(data)
        result = recovery.reconstruct(collection, truncate=truncate)
    except ValueError as exc:
        return _err(f"Recovery failed: {exc}", 400)

    body = result.to_dict()
    body["ok"] = True
    body["n"] = collection.n
    body["points"] = collection.to_dict()["points"]
    body["skipped"] = collection.skipped
    return web.json_response(body)


async def api_decode(request: web.Request) -> web.Response:
    """
    POST /api/decode
    Body JSON: { value: str, base: str | int }

    Returns: { value: str }  (decimal)
    """
    try:
        data = await request.json()
    except ValueError:
        return _err("Invalid JSON body", 400)

    if not isinstance(data, dict) or "value" not in data or "base" not in data:
        return _err("Missing value or base", 400)

    try:
        base = encoding.parse_base(data["base"])
        value = encoding.decode(str(data["value"]), base)
    except ValueError as exc:
        return _err(str(exc), 400)

    return web.json_response({"ok": True, "value": str(value), "base": base})


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _err(msg: str, status: int = 400) -> web.Response:
    logger.info("Rejected request: %s", msg)
    return web.json_response({"ok": False, "error": msg}, status=status)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------

def create_app() -> web.Application:
    app = web.Application(client_max_size=1024 * 1024)  # 1 MB documents

    app.router.add_post("/api/reconstruct", api_reconstruct)
    app.router.add_post("/api/decode", api_decode)

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description="Poly Secret web API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8787)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    print(f"Poly Secret API — http://localhost:{args.port}")
    web.run_app(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
