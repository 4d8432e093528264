from __future__ import annotations

import asyncio

from aiohttp import web

from tvremote.core.resolver import NameResolver, extract_friendly_name


async def _resolve_from(body: str, status: int = 200) -> str | None:
    app = web.Application()

    async def description(_request):
        return web.Response(text=body, status=status, content_type="text/xml")

    app.router.add_get("/dmr.xml", description)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    port = runner.addresses[0][1]
    try:
        return await NameResolver(timeout=2.0).resolve(
            f"http://127.0.0.1:{port}/dmr.xml"
        )
    finally:
        await runner.cleanup()


def test_extract_friendly_name_first_match_case_insensitive():
    document = (
        "<root><FRIENDLYNAME> Bedroom &amp; Office </FRIENDLYNAME>"
        "<friendlyName>Second</friendlyName></root>"
    )
    assert extract_friendly_name(document) == "Bedroom & Office"


def test_extract_friendly_name_missing_or_empty():
    assert extract_friendly_name("<root><modelName>QE55</modelName></root>") is None
    assert extract_friendly_name("<friendlyName>  </friendlyName>") is None


def test_resolve_fetches_description():
    body = (
        '<?xml version="1.0"?><root><device>'
        "<friendlyName>[TV] Samsung Q80</friendlyName>"
        "</device></root>"
    )
    assert asyncio.run(_resolve_from(body)) == "[TV] Samsung Q80"


def test_resolve_without_name_returns_none():
    assert asyncio.run(_resolve_from("not found", status=404)) is None


def test_resolve_swallows_transport_errors():
    resolver = NameResolver(timeout=0.5)
    assert asyncio.run(resolver.resolve("not a url")) is None
    assert asyncio.run(resolver.resolve("http://127.0.0.1:1/dmr.xml")) is None
