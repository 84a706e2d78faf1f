"""Application keys for type-safe app configuration access."""

from aiohttp import web

from justnotes.core.index import ContentIndex

index_key = web.AppKey("index", ContentIndex)
verbose_key = web.AppKey("verbose", bool)
