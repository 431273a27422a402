"""Persistence helpers for hostel-wide notices, bus timings and contacts."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.domain.entities import BusTiming, EmergencyContact, Notice
from app.infrastructure.models import BusTimingModel, EmergencyContactModel, NoticeModel
from app.utils import ensure_app_naive_datetime, ensure_app_timezone


class NoticeRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notice: Notice) -> Notice:
        model = NoticeModel(
            title=notice.title, content=notice.content, priority=notice.priority
        )
        if notice.created_at is not None:
            model.created_at = ensure_app_naive_datetime(notice.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_created_after(self, after: datetime) -> Sequence[Notice]:
        query = (
            self.session.query(NoticeModel)
            .filter(NoticeModel.created_at > ensure_app_naive_datetime(after))
            .order_by(NoticeModel.created_at.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: NoticeModel) -> Notice:
        return Notice(
            id=model.id,
            title=model.title,
            content=model.content,
            priority=model.priority,
            created_at=ensure_app_timezone(model.created_at),
        )


class BusTimingRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, timing: BusTiming) -> BusTiming:
        model = BusTimingModel(
            route_name=timing.route_name, departure_time=timing.departure_time
        )
        if timing.created_at is not None:
            model.created_at = ensure_app_naive_datetime(timing.created_at)
        if timing.updated_at is not None:
            model.updated_at = ensure_app_naive_datetime(timing.updated_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_changed_after(self, after: datetime) -> Sequence[BusTiming]:
        """Return timings created or updated after ``after``."""

        moment = ensure_app_naive_datetime(after)
        query = self.session.query(BusTimingModel).filter(
            or_(BusTimingModel.updated_at > moment, BusTimingModel.created_at > moment)
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: BusTimingModel) -> BusTiming:
        return BusTiming(
            id=model.id,
            route_name=model.route_name,
            departure_time=model.departure_time,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


class EmergencyContactRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, contact: EmergencyContact) -> EmergencyContact:
        model = EmergencyContactModel(
            name=contact.name, designation=contact.designation, phone=contact.phone
        )
        if contact.created_at is not None:
            model.created_at = ensure_app_naive_datetime(contact.created_at)
        if contact.updated_at is not None:
            model.updated_at = ensure_app_naive_datetime(contact.updated_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_changed_after(self, after: datetime) -> Sequence[EmergencyContact]:
        moment = ensure_app_naive_datetime(after)
        query = self.session.query(EmergencyContactModel).filter(
            or_(
                EmergencyContactModel.updated_at > moment,
                EmergencyContactModel.created_at > moment,
            )
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: EmergencyContactModel) -> EmergencyContact:
        return EmergencyContact(
            id=model.id,
            name=model.name,
            designation=model.designation,
            phone=model.phone,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["BusTimingRepository", "EmergencyContactRepository", "NoticeRepository"]
