from sqlalchemy import CheckConstraint, ForeignKey, Index, UniqueConstraint, false, true
from sqlalchemy.orm import DeclarativeBase, relationship
from sqlalchemy.schema import Column
from sqlalchemy.types import Boolean, Integer, String


class Base(DeclarativeBase):
    pass


class Event(Base):
    __tablename__ = "events"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    is_team_game = Column(Boolean, nullable=False, default=False)

    team_results = relationship("TeamResult", back_populates="event")
    individual_results = relationship("IndividualResult", back_populates="event")


class Team(Base):
    __tablename__ = "teams"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)

    players = relationship("Player", back_populates="team")
    results = relationship("TeamResult", back_populates="team")


class Player(Base):
    __tablename__ = "players"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)

    team = relationship("Team", back_populates="players")
    results = relationship("IndividualResult", back_populates="player")


class TeamResult(Base):
    __tablename__ = "results_team"
    __table_args__ = (
        UniqueConstraint("event_id", "position", name="uq_results_team_event_position"),
        UniqueConstraint("event_id", "team_id", name="uq_results_team_event_team"),
        CheckConstraint("position IN (1, 2)", name="ck_results_team_position"),
    )
    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    position = Column(Integer, nullable=False)
    points = Column(Integer, nullable=False)

    event = relationship("Event", back_populates="team_results")
    team = relationship("Team", back_populates="results")


class IndividualResult(Base):
    __tablename__ = "results_individual"
    __table_args__ = (
        UniqueConstraint("event_id", "position", name="uq_results_individual_event_position"),
        UniqueConstraint("event_id", "player_id", name="uq_results_individual_event_player"),
        CheckConstraint("position IN (1, 2, 3)", name="ck_results_individual_position"),
    )
    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False)
    position = Column(Integer, nullable=False)
    points = Column(Integer, nullable=False)
    mvp = Column(Boolean, nullable=False, default=False, server_default=false())

    event = relationship("Event", back_populates="individual_results")
    player = relationship("Player", back_populates="results")


# At most one MVP per event.
Index(
    "uq_results_individual_event_mvp",
    IndividualResult.event_id,
    unique=True,
    postgresql_where=IndividualResult.mvp == true(),
    sqlite_where=IndividualResult.mvp == true(),
)
