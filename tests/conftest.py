"""Pytest fixtures: a fake BRAVIA display served on a free local port."""
import pytest
import pytest_asyncio
from aiohttp import web

from braviarpc import BraviaClient
from mock_bravia import FakeBravia, build_app

PSK = "0000"


@pytest.fixture
def fake() -> FakeBravia:
    return FakeBravia(psk=PSK)


@pytest_asyncio.fixture
async def device_url(fake):
    runner = web.AppRunner(build_app(fake))
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)   # port 0 = OS picks a free port
    await site.start()
    port = runner.addresses[0][1]
    yield f"http://127.0.0.1:{port}"
    if fake.gate is not None:
        fake.gate.set()
    await runner.cleanup()


@pytest_asyncio.fixture
async def client(device_url):
    tv = await BraviaClient.connect(device_url, PSK)
    yield tv
    await tv.close()


@pytest_asyncio.fixture
async def client_no_psk(device_url):
    tv = await BraviaClient.connect(device_url)
    yield tv
    await tv.close()
