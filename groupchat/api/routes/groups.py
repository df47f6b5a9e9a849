"""Group & Message Routes — the /groups resource tree.

Invariants:
    - Every route depends on get_current_user_id: identity is resolved (or the
      request rejected with 400) before any group lookup
    - group_id is taken as a raw string; anything that is not a positive integer
      is an unknown group (404), never a 422
    - Handlers only translate HTTP ↔ service calls; rules live in the services

Design Decisions:
    - Bodies read via read_json_body instead of Pydantic request models, so a
      malformed body reaches service validation as {} and yields the domain 400
"""

import logging

from fastapi import APIRouter, Depends, Request, status

from groupchat.api.dependencies import AppServices, get_current_user_id, get_services
from groupchat.api.responses import json_response, read_json_body
from groupchat.core.domain_types import UserId, parse_group_id
from groupchat.schemas.group import GroupCreated, GroupSummary, JoinResult
from groupchat.schemas.message import MessageRecord

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/groups", tags=["groups"])


@router.get("")
async def list_groups(
    user_id: UserId = Depends(get_current_user_id),
    services: AppServices = Depends(get_services),
):
    """List every group."""
    groups = await services.groups.list_groups()
    return json_response(
        status.HTTP_200_OK,
        [GroupSummary.model_validate(g).model_dump(mode="json") for g in groups],
    )


@router.post("")
async def create_group(
    request: Request,
    user_id: UserId = Depends(get_current_user_id),
    services: AppServices = Depends(get_services),
):
    """Create a group owned by the caller. The caller is not auto-joined."""
    body = await read_json_body(request)
    group = await services.groups.create_group(user_id, body.get("name"))
    return json_response(
        status.HTTP_201_CREATED,
        GroupCreated.model_validate(group).model_dump(mode="json"),
    )


@router.post("/{group_id}/join")
async def join_group(
    group_id: str,
    user_id: UserId = Depends(get_current_user_id),
    services: AppServices = Depends(get_services),
):
    """Join a group. Joining again is a no-op."""
    await services.groups.join_group(user_id, parse_group_id(group_id))
    return json_response(status.HTTP_200_OK, JoinResult().model_dump(mode="json"))


@router.post("/{group_id}/messages")
async def send_message(
    group_id: str,
    request: Request,
    user_id: UserId = Depends(get_current_user_id),
    services: AppServices = Depends(get_services),
):
    """Post a message. Requires membership."""
    body = await read_json_body(request)
    message = await services.messages.send_message(
        user_id, parse_group_id(group_id), body.get("message"),
    )
    return json_response(
        status.HTTP_201_CREATED,
        MessageRecord.model_validate(message).model_dump(mode="json"),
    )


@router.get("/{group_id}/messages")
async def list_messages(
    group_id: str,
    user_id: UserId = Depends(get_current_user_id),
    services: AppServices = Depends(get_services),
):
    """List a group's messages, oldest first. Reading is not membership-gated."""
    messages = await services.messages.list_messages(parse_group_id(group_id))
    return json_response(
        status.HTTP_200_OK,
        [MessageRecord.model_validate(m).model_dump(mode="json") for m in messages],
    )
