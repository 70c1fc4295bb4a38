"""
Poly Secret — Web API tests.
"""

import os
import sys

from aiohttp.test_utils import AioHTTPTestCase

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from web.app import create_app


DOCUMENT = {
    "keys": {"n": 3, "k": 2},
    "1": {"base": "10", "value": "5"},
    "2": {"base": "16", "value": "8"},
    "3": {"base": "2", "value": "1011"},
}


class ReconstructApiTest(AioHTTPTestCase):

    async def get_application(self):
        return create_app()

    async def test_reconstruct(self):
        resp = await self.client.post("/api/reconstruct", json=DOCUMENT)
        assert resp.status == 200
        data = await resp.json()
        assert data["ok"] is True
        assert data["secret"] == "2"
        assert data["per_term_contributions"] == ["10", "-8"]
        assert data["verification"]["alternate_secret"] == "2"
        assert data["verification"]["matched"] is True
        assert data["points"] == [["1", "5"], ["2", "8"], ["3", "11"]]

    async def test_reconstruct_insufficient(self):
        document = dict(DOCUMENT, keys={"n": 3, "k": 4})
        resp = await self.client.post("/api/reconstruct", json=document)
        assert resp.status == 400
        data = await resp.json()
        assert data["ok"] is False
        assert "Insufficient" in data["error"]

    async def test_reconstruct_inexact_truncate(self):
        document = {
            "keys": {"n": 2, "k": 2},
            "1": {"base": "10", "value": "0"},
            "3": {"base": "10", "value": "1"},
        }
        resp = await self.client.post("/api/reconstruct", json=document)
        assert resp.status == 400

        resp = await self.client.post("/api/reconstruct", json=dict(document, truncate=True))
        assert resp.status == 200
        assert (await resp.json())["secret"] == "0"

    async def test_reconstruct_truncate_must_be_boolean(self):
        resp = await self.client.post("/api/reconstruct", json=dict(DOCUMENT, truncate="false"))
        assert resp.status == 400
        assert "boolean" in (await resp.json())["error"]

    async def test_reconstruct_invalid_json(self):
        resp = await self.client.post("/api/reconstruct", data="not json")
        assert resp.status == 400

    async def test_decode(self):
        resp = await self.client.post("/api/decode", json={"value": "zz", "base": "36"})
        assert resp.status == 200
        assert (await resp.json())["value"] == "1295"

        resp = await self.client.post("/api/decode", json={"value": "12", "base": "40"})
        assert resp.status == 400
