"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from askboard.application.usecase.auth import GetCurrentUserUseCase
from askboard.application.usecase.base import CamelModel
from askboard.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from askboard.config import Settings
from askboard.domain.value import VoteTargetType, VoteType
from askboard.interface.api.session import require_user

router = APIRouter(prefix="/votes", tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(CamelModel):
    """API request for voting."""

    target_type: VoteTargetType
    target_id: UUID
    vote_type: VoteType


@router.post("", response_model=CastVoteResponse)
async def cast_vote(
    request: Request,
    body: CastVoteAPIRequest,
    use_case: FromDishka[CastVoteUseCase],
    current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> CastVoteResponse:
    """Vote on a question or answer.

    Voting the same direction twice withdraws the vote; the other
    direction flips it.
    """
    user = await require_user(request, current_user_use_case, settings)
    return await use_case.execute(
        CastVoteRequest(
            target_type=body.target_type,
            target_id=body.target_id,
            vote_type=body.vote_type,
            user_id=user.id,
        )
    )
