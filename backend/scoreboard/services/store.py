"""Persistence gateway for games and records.

Every function is a single unit of work against the session: it either
commits or rolls back. Database failures surface as StoreError carrying the
driver's message.
"""
from contextlib import contextmanager
from typing import Iterable, List, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from scoreboard import db
from scoreboard.errors import StoreError
from scoreboard.models import Game, Record


@contextmanager
def _unit_of_work(action: str):
    try:
        yield db.session
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[store-error] action={action} error={exc}")
        raise StoreError(str(exc)) from exc


def _apply(row, fields: dict, allowed: Iterable[str]) -> None:
    for name in allowed:
        if name in fields:
            setattr(row, name, fields[name])


# Games

def list_games() -> List[Game]:
    with _unit_of_work('list_games'):
        return Game.query.order_by(Game.id).all()


def get_game(game_id: int) -> Optional[Game]:
    with _unit_of_work('get_game'):
        return Game.query.filter_by(id=game_id).first()


def insert_game(game_title: str, game_image: Optional[str] = None) -> Game:
    with _unit_of_work('insert_game') as session:
        game = Game(game_title=game_title, game_image=game_image)
        session.add(game)
        session.commit()
        session.refresh(game)
        return game


def update_game(game_id: int, fields: dict) -> Optional[Game]:
    with _unit_of_work('update_game') as session:
        game = Game.query.filter_by(id=game_id).first()
        if game is None:
            return None
        _apply(game, fields, ('game_title', 'game_image'))
        session.commit()
        session.refresh(game)
        return game


def delete_game(game_id: int) -> Optional[int]:
    """Delete a game and all of its records in one transaction.

    Returns the number of records removed alongside it, or None when no game
    matched (in which case nothing is deleted).
    """
    with _unit_of_work('delete_game') as session:
        if Game.query.filter_by(id=game_id).first() is None:
            return None
        removed = Record.query.filter_by(game_id=game_id).delete(synchronize_session=False)
        Game.query.filter_by(id=game_id).delete(synchronize_session=False)
        session.commit()
        return removed


# Records

def list_records(game_id: Optional[int] = None) -> List[Record]:
    with _unit_of_work('list_records'):
        query = Record.query
        if game_id is not None:
            query = query.filter_by(game_id=game_id)
        return query.order_by(Record.game_id, Record.rank).all()


def get_record(record_id: int) -> Optional[Record]:
    with _unit_of_work('get_record'):
        return Record.query.filter_by(id=record_id).first()


def insert_record(handle: str, rank: int, time: str, game_id: int) -> Record:
    with _unit_of_work('insert_record') as session:
        record = Record(handle=handle, rank=rank, time=time, game_id=game_id)
        session.add(record)
        session.commit()
        session.refresh(record)
        return record


def update_record(record_id: int, fields: dict) -> Optional[Record]:
    with _unit_of_work('update_record') as session:
        record = Record.query.filter_by(id=record_id).first()
        if record is None:
            return None
        _apply(record, fields, ('handle', 'rank', 'time'))
        session.commit()
        session.refresh(record)
        return record


def delete_record(record_id: int) -> bool:
    with _unit_of_work('delete_record') as session:
        deleted = Record.query.filter_by(id=record_id).delete(synchronize_session=False)
        session.commit()
        return deleted > 0
