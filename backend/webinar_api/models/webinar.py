"""
Webinar persistence model.

Column names match the `Webinar` table layout (camelCase date and organizer
columns); attribute names stay snake_case on the Python side.
"""

from sqlalchemy import Column, String, Integer, DateTime, CheckConstraint

from webinar_api.db.base import Base


class WebinarRecord(Base):
    __tablename__ = "Webinar"

    id = Column(String(255), primary_key=True)
    title = Column(String(255), nullable=False)
    seats = Column(Integer, nullable=False)
    start_date = Column("startDate", DateTime(timezone=True), nullable=False)
    end_date = Column("endDate", DateTime(timezone=True), nullable=False)
    organizer_id = Column("organizerId", String(255), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("seats > 0 AND seats <= 1000", name="check_webinar_seats_range"),
    )

    def __repr__(self) -> str:
        return f"<WebinarRecord(id={self.id}, title={self.title}, seats={self.seats})>"
