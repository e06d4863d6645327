"""
Shared fixtures for rbxlookup tests
"""
import asyncio

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from rbxlookup import RobloxClient


@pytest.fixture
def client():
    """Client whose HTTP layer is patched per test; never touches the network"""
    return RobloxClient()


async def _group_roles(request):
    group_id = int(request.match_info["group_id"])
    if group_id == 404:
        return web.json_response(
            {"errors": [{"code": 1, "message": "Group is invalid or does not exist."}]},
            status=404,
        )
    return web.json_response({
        "groupId": group_id,
        "roles": [
            {"id": 11, "name": "Guest", "rank": 0, "memberCount": 0},
            {"id": 12, "name": "Member", "rank": 1, "memberCount": 40},
            {"id": 13, "name": "Officer", "rank": 50, "memberCount": 3},
            {"id": 14, "name": "Owner", "rank": 255, "memberCount": 1},
        ],
    })


async def _user_roles(request):
    return web.json_response({
        "data": [
            {"group": {"id": 7, "name": "Seven"}, "role": {"id": 70, "rank": 3}},
            {"group": {"id": 8, "name": "Eight"}, "role": {"id": 80, "rank": 255}},
        ]
    })


KNOWN_USERS = {"builderman": 156, "a b&c=d/é": 157}


async def _legacy_user(request):
    # legacy endpoint labels its JSON as text/plain
    return web.Response(
        text='{"Id": %s, "Username": "builderman"}' % request.match_info["user_id"],
        content_type="text/plain",
    )


async def _get_by_username(request):
    user_id = KNOWN_USERS.get(request.query["username"])
    if user_id is None:
        return web.json_response(
            {"success": False, "errorMessage": "User not found"},
            status=404,
        )
    return web.json_response({"Id": user_id, "Username": request.query["username"]})


async def _inventory(request):
    if request.match_info["item_id"] == "999":
        return web.Response(text="{not json", content_type="application/json")
    return web.json_response({
        "previousPageCursor": None,
        "nextPageCursor": None,
        "data": [{"type": "Asset", "id": int(request.match_info["item_id"])}],
    })


async def _profile(request):
    if request.match_info["user_id"] == "408":
        await asyncio.sleep(1)
    return web.Response(
        text="<html><body><p>About: verify ABC123 thanks</p></body></html>",
        content_type="text/html",
    )


def _make_app():
    app = web.Application()
    app.router.add_get("/v1/groups/{group_id}/roles", _group_roles)
    app.router.add_get("/v2/users/{user_id}/groups/roles", _user_roles)
    app.router.add_get("/users/get-by-username", _get_by_username)
    app.router.add_get("/users/{user_id}/profile", _profile)
    app.router.add_get("/users/{user_id}", _legacy_user)
    app.router.add_get(
        "/v1/users/{user_id}/items/{asset_type}/{item_id}", _inventory
    )
    return app


@pytest_asyncio.fixture
async def roblox_server():
    """Local stand-in for every Roblox host the client talks to"""
    server = TestServer(_make_app())
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def endpoints(roblox_server):
    base_url = f"http://{roblox_server.host}:{roblox_server.port}"
    return {
        "groups": base_url,
        "api": base_url,
        "inventory": base_url,
        "www": base_url,
    }
