from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Iterator, List, Optional


def _parse_date(value: Any) -> Any:
    """RFC 2822 date from the API -> datetime; anything unparseable is kept as is."""
    if not value or not isinstance(value, str):
        return value
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return value


def _to_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass
class Account:
    sid: Optional[str] = None
    friendly_name: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    time_zone: Optional[str] = None
    account_balance: Optional[float] = None
    max_outbound_limit: Optional[int] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    uri: Optional[str] = None
    subresource_uris: Dict[str, str] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Account":
        d = d or {}
        return cls(
            sid=d.get("sid"),
            friendly_name=d.get("friendly_name"),
            status=d.get("status"),
            type=d.get("type"),
            time_zone=d.get("time_zone"),
            account_balance=_to_float(d.get("account_balance")),
            max_outbound_limit=_to_int(d.get("max_outbound_limit")),
            date_created=_parse_date(d.get("date_created")),
            date_updated=_parse_date(d.get("date_updated")),
            uri=d.get("uri"),
            subresource_uris=d.get("subresource_uris") or {},
            raw=d,
        )


@dataclass
class SmsMessage:
    sid: Optional[str] = None
    account_sid: Optional[str] = None
    to: Optional[str] = None
    from_: Optional[str] = None
    body: Optional[str] = None
    status: Optional[str] = None
    direction: Optional[str] = None
    price: Optional[float] = None
    num_segments: Optional[int] = None
    api_version: Optional[str] = None
    date_sent: Optional[datetime] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    uri: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SmsMessage":
        d = d or {}
        return cls(
            sid=d.get("sid"),
            account_sid=d.get("account_sid"),
            to=d.get("to"),
            from_=d.get("from"),
            body=d.get("body"),
            status=d.get("status"),
            direction=d.get("direction"),
            price=_to_float(d.get("price")),
            num_segments=_to_int(d.get("num_segments")),
            api_version=d.get("api_version"),
            date_sent=_parse_date(d.get("date_sent")),
            date_created=_parse_date(d.get("date_created")),
            date_updated=_parse_date(d.get("date_updated")),
            uri=d.get("uri"),
            raw=d,
        )


@dataclass
class SmsList:
    """One page of SMS messages plus the paging metadata returned with it."""

    items: List[SmsMessage] = field(default_factory=list)
    page: Optional[int] = None
    num_pages: Optional[int] = None
    page_size: Optional[int] = None
    total: Optional[int] = None
    start: Optional[int] = None
    end: Optional[int] = None
    uri: Optional[str] = None
    first_page_uri: Optional[str] = None
    last_page_uri: Optional[str] = None
    next_page_uri: Optional[str] = None
    previous_page_uri: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SmsList":
        d = d or {}
        return cls(
            items=[SmsMessage.from_dict(m) for m in (d.get("sms_messages") or [])],
            page=_to_int(d.get("page")),
            num_pages=_to_int(d.get("num_pages")),
            page_size=_to_int(d.get("page_size")),
            total=_to_int(d.get("total")),
            start=_to_int(d.get("start")),
            end=_to_int(d.get("end")),
            uri=d.get("uri"),
            first_page_uri=d.get("first_page_uri"),
            last_page_uri=d.get("last_page_uri"),
            next_page_uri=d.get("next_page_uri"),
            previous_page_uri=d.get("previous_page_uri"),
        )

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[SmsMessage]:
        return iter(self.items)
