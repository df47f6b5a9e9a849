"""Root Route — unauthenticated landing endpoint."""

from fastapi import APIRouter, status

from groupchat.api.responses import json_response

router = APIRouter(tags=["root"])


@router.get("/")
async def index():
    return json_response(status.HTTP_200_OK, {"message": "Group chat API"})
