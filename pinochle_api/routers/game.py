from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from pinochle_api.converter import DataConverter
from pinochle_api.models.request_models import (
    DeclareTrumpRequest,
    RecordBidRequest,
    RecordMeldRequest,
    RecordTricksRequest,
    StartNewGameRequest,
    StartNewHandRequest,
)
from pinochle_api.models.response_models import (
    CompletedHandsResponse,
    GameResponse,
    HandResponse,
    RunningTotalResponse,
)
from pinochle_api.services.game_service import GameService

game_router = APIRouter(prefix="/api/games")
data_converter = DataConverter()


def get_game_service(request: Request) -> GameService:
    return request.app.state.game_service


class GameAPI:
    @staticmethod
    @game_router.post("", response_model=GameResponse)
    async def start_new_game(
        body: StartNewGameRequest, service: GameService = Depends(get_game_service)
    ):
        game = await service.start_new_game(body.dealer)
        return data_converter.convert_game_to_gameresponse(game)

    @staticmethod
    @game_router.get("", response_model=List[GameResponse])
    async def list_games(service: GameService = Depends(get_game_service)):
        games = await service.list_games()
        return [data_converter.convert_game_to_gameresponse(game) for game in games]

    @staticmethod
    @game_router.post("/start_hand", response_model=GameResponse)
    async def start_new_hand(
        body: StartNewHandRequest, service: GameService = Depends(get_game_service)
    ):
        game = await service.start_new_hand(body.game_id)
        return data_converter.convert_game_to_gameresponse(game)

    @staticmethod
    @game_router.get("/{game_id}", response_model=GameResponse)
    async def get_game(game_id: UUID, service: GameService = Depends(get_game_service)):
        game = await service.get_game(game_id)
        return data_converter.convert_game_to_gameresponse(game)


class HandAPI:
    @staticmethod
    @game_router.get("/{game_id}/current_hand", response_model=HandResponse)
    async def get_current_hand(
        game_id: UUID, service: GameService = Depends(get_game_service)
    ):
        hand = await service.get_current_hand(game_id)
        return data_converter.convert_hand_to_handresponse(hand)

    @staticmethod
    @game_router.get("/{game_id}/completed_hands", response_model=CompletedHandsResponse)
    async def get_completed_hands(
        game_id: UUID, service: GameService = Depends(get_game_service)
    ):
        hands = await service.get_completed_hands(game_id)
        return data_converter.convert_hands_to_completedhandsresponse(list(hands))

    @staticmethod
    @game_router.post("/{game_id}/record_bid", response_model=GameResponse)
    async def record_bid(
        game_id: UUID,
        body: RecordBidRequest,
        service: GameService = Depends(get_game_service),
    ):
        game = await service.record_bid(game_id, body.player, body.bid)
        return data_converter.convert_game_to_gameresponse(game)

    @staticmethod
    @game_router.post("/{game_id}/declare_trump", response_model=GameResponse)
    async def declare_trump(
        game_id: UUID,
        body: DeclareTrumpRequest,
        service: GameService = Depends(get_game_service),
    ):
        game = await service.declare_trump(game_id, body.trump)
        return data_converter.convert_game_to_gameresponse(game)

    @staticmethod
    @game_router.post("/{game_id}/record_meld", response_model=GameResponse)
    async def record_meld(
        game_id: UUID,
        body: RecordMeldRequest,
        service: GameService = Depends(get_game_service),
    ):
        game = await service.record_meld(game_id, body.us_meld, body.them_meld)
        return data_converter.convert_game_to_gameresponse(game)

    @staticmethod
    @game_router.post("/{game_id}/record_tricks", response_model=GameResponse)
    async def record_tricks(
        game_id: UUID,
        body: RecordTricksRequest,
        service: GameService = Depends(get_game_service),
    ):
        game = await service.record_tricks(game_id, body.us_tricks, body.them_tricks)
        return data_converter.convert_game_to_gameresponse(game)


class ScoreAPI:
    @staticmethod
    @game_router.get("/{game_id}/running_total", response_model=RunningTotalResponse)
    async def get_running_total(
        game_id: UUID, service: GameService = Depends(get_game_service)
    ):
        total = await service.get_running_total(game_id)
        return data_converter.convert_totals_to_runningtotalresponse(total.us, total.them)
