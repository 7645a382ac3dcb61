import uuid

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()
metadata = Base.metadata


def _new_id() -> str:
    return str(uuid.uuid4())


class TeeSlot(Base):
    __tablename__ = 'tee_slots'
    __table_args__ = (
        UniqueConstraint('date', 'time', name='uq_tee_slots_date_time'),
    )

    id = Column(Text, primary_key=True, default=_new_id)
    date = Column(Date, nullable=False, index=True)
    time = Column(Text, nullable=False)
    start_minute = Column(Integer, nullable=False)
    course = Column(Text, nullable=False, server_default=text("'Packanack Golf Course'"))
    holes = Column(Integer, nullable=False, server_default=text('18'))
    max_players = Column(Integer, nullable=False, server_default=text('4'))
    price = Column(Numeric(8, 2), nullable=False, server_default=text('85.00'))
    is_premium = Column(Boolean, nullable=False, server_default=text('false'))

    players = relationship(
        'BookedPlayer',
        back_populates='slot',
        order_by='BookedPlayer.position',
        collection_class=ordering_list('position'),
        cascade='all, delete-orphan',
    )

    # Wire form: parallel lists, index-aligned by construction

    @property
    def booked_by(self) -> list[str]:
        return [p.user_id for p in self.players]

    @property
    def player_names(self) -> list[str]:
        return [p.name for p in self.players]

    @property
    def player_types(self) -> list[str]:
        return [p.player_type for p in self.players]

    @property
    def transport_modes(self) -> list[str]:
        return [p.transport_mode for p in self.players]

    @property
    def holes_playing(self) -> list[str]:
        return [p.holes_playing for p in self.players]

    @property
    def occupancy(self) -> int:
        return len(self.players)

    @property
    def spots_available(self) -> int:
        return max(self.max_players - self.occupancy, 0)

    @property
    def status(self) -> str:
        if self.occupancy == 0:
            return "available"
        if self.occupancy < self.max_players:
            return "partial"
        return "full"


class BookedPlayer(Base):
    __tablename__ = 'booked_players'

    id = Column(Integer, primary_key=True)
    slot_id = Column(ForeignKey('tee_slots.id', ondelete='CASCADE'), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False)
    player_type = Column(Text, nullable=False, server_default=text("'member'"))
    transport_mode = Column(Text, nullable=False, server_default=text("'riding'"))
    holes_playing = Column(Text, nullable=False, server_default=text("'18'"))

    slot = relationship('TeeSlot', back_populates='players')
