"""Greeting route served on the root path."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from src.domain.greeting import greeting

greeting_router = APIRouter()


class GreetingAPI:
    @staticmethod
    @greeting_router.get("/", response_class=PlainTextResponse)
    async def say_hello():
        return greeting()
