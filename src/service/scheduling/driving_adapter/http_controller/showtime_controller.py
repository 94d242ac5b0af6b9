from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from src.platform.constant.route_constant import (
    SHOWTIME_CREATE,
    SHOWTIME_DELETE,
    SHOWTIME_GET,
    SHOWTIME_UPDATE,
)
from src.platform.logging.loguru_io import Logger
from src.platform.types.camel_model import INT32_MAX
from src.service.scheduling.app.command.create_showtime_use_case import CreateShowtimeUseCase
from src.service.scheduling.app.command.delete_showtime_use_case import DeleteShowtimeUseCase
from src.service.scheduling.app.command.update_showtime_use_case import UpdateShowtimeUseCase
from src.service.scheduling.app.query.get_showtime_use_case import GetShowtimeUseCase
from src.service.scheduling.domain.entity.showtime_entity import Showtime
from src.service.scheduling.driving_adapter.http_controller.schema.showtime_schema import (
    ShowtimeRequest,
    ShowtimeResponse,
)


router = APIRouter()


def _to_response(showtime: Showtime) -> ShowtimeResponse:
    assert showtime.id is not None
    return ShowtimeResponse(
        id=showtime.id,
        movie_id=showtime.movie_id,
        theater=showtime.theater,
        start_time=showtime.start_time,
        end_time=showtime.end_time,
        price=showtime.price,
    )


@router.post(SHOWTIME_CREATE, status_code=status.HTTP_200_OK)
@Logger.io
async def create_showtime(
    request: ShowtimeRequest,
    use_case: CreateShowtimeUseCase = Depends(CreateShowtimeUseCase.depends),
) -> ShowtimeResponse:
    showtime = await use_case.create_showtime(
        theater=request.theater,
        start_time=request.start_time,
        end_time=request.end_time,
        movie_id=request.movie_id,
        price=request.price,
    )
    return _to_response(showtime)


@router.get(SHOWTIME_GET)
@Logger.io
async def get_showtime(
    showtime_id: Annotated[int, Path(le=INT32_MAX)],
    use_case: GetShowtimeUseCase = Depends(GetShowtimeUseCase.depends),
) -> ShowtimeResponse:
    showtime = await use_case.get_showtime(showtime_id=showtime_id)
    return _to_response(showtime)


@router.post(SHOWTIME_UPDATE, status_code=status.HTTP_200_OK)
@Logger.io
async def update_showtime(
    showtime_id: Annotated[int, Path(le=INT32_MAX)],
    request: ShowtimeRequest,
    use_case: UpdateShowtimeUseCase = Depends(UpdateShowtimeUseCase.depends),
) -> ShowtimeResponse:
    showtime = await use_case.update_showtime(
        showtime_id=showtime_id,
        theater=request.theater,
        start_time=request.start_time,
        end_time=request.end_time,
        movie_id=request.movie_id,
        price=request.price,
    )
    return _to_response(showtime)


@router.delete(SHOWTIME_DELETE, status_code=status.HTTP_200_OK)
@Logger.io
async def delete_showtime(
    showtime_id: Annotated[int, Path(le=INT32_MAX)],
    use_case: DeleteShowtimeUseCase = Depends(DeleteShowtimeUseCase.depends),
) -> None:
    await use_case.delete_showtime(showtime_id=showtime_id)
