from __future__ import annotations

from datetime import date

from ..common.errors import ZangValidationError
from ..common.logging import logger
from ..common.logging_utils import mask_phone, mask_sid, shorten_body
from ..common.rest_request import RestRequest
from ..domain.enums import HttpMethod
from ..domain.models import SmsList, SmsMessage
from .base import Connector, require

DATE_FORMAT = "%Y-%m-%d"


def _callback_method(value: HttpMethod | str) -> HttpMethod:
    try:
        return HttpMethod(str(value).upper())
    except ValueError as e:
        raise ZangValidationError(
            "StatusCallbackMethod", f"Unsupported StatusCallbackMethod: {value!r}"
        ) from e


class SmsConnector(Connector):
    """SMS endpoint: send, view and list messages.

    Every method takes an optional ``account_sid``; when omitted, the sid
    from the provider's configuration is used.
    """

    component = "sms"

    def send_sms(
        self,
        to: str,
        body: str,
        from_: str | None = None,
        status_callback: str | None = None,
        status_callback_method: HttpMethod = HttpMethod.POST,
        allow_multiple: bool = False,
        *,
        account_sid: str | None = None,
    ) -> SmsMessage:
        """
        Send an SMS.

        Args:
            to: destination number.
            body: message text.
            from_: sender number; the service picks one when omitted.
            status_callback: URL notified about delivery status changes.
            status_callback_method: verb used for the status callback.
            allow_multiple: split bodies over 160 chars into several messages
                instead of truncating.

        Raises:
            ZangValidationError: ``to`` or ``body`` is empty, or the callback
                method is unknown (no request is sent).
            ZangApiError: non-2xx response.
            ZangTransportError: network failure.
        """
        require("To", to)
        require("Body", body)
        status_callback_method = _callback_method(status_callback_method)

        sid = self._account_sid(account_sid)
        request = self._request(HttpMethod.POST, f"Accounts/{sid}/SMS/Messages.json")
        self._set_params_for_send_sms(
            request, to, body, from_, status_callback, status_callback_method, allow_multiple
        )

        message = self._execute(request, SmsMessage)
        logger.info(
            {
                "msg": "SMS sent",
                "sid": mask_sid(message.sid),
                "to": mask_phone(to),
                "body": shorten_body(body),
            }
        )
        return message

    def view_sms_message(self, sms_message_sid: str, *, account_sid: str | None = None) -> SmsMessage:
        require("SmsMessageSid", sms_message_sid)

        sid = self._account_sid(account_sid)
        request = self._request(HttpMethod.GET, f"Accounts/{sid}/SMS/Messages/{sms_message_sid}.json")
        return self._execute(request, SmsMessage)

    def list_sms_messages(
        self,
        to: str | None = None,
        from_: str | None = None,
        date_sent_gte: date | None = None,
        date_sent_lt: date | None = None,
        page: int | None = None,
        page_size: int | None = None,
        *,
        account_sid: str | None = None,
    ) -> SmsList:
        """
        One page of sent/received messages, optionally filtered.

        Date filters are sent as ``DateSent>`` / ``DateSent<`` with
        ``yyyy-MM-dd`` values; ``datetime`` values are truncated to the day.
        """
        sid = self._account_sid(account_sid)
        request = self._request(HttpMethod.GET, f"Accounts/{sid}/SMS/Messages.json")
        self._set_params_for_list_sms_messages(
            request, to, from_, date_sent_gte, date_sent_lt, page, page_size
        )
        return self._execute(request, SmsList)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _set_params_for_send_sms(
        request: RestRequest,
        to: str,
        body: str,
        from_: str | None,
        status_callback: str | None,
        status_callback_method: HttpMethod,
        allow_multiple: bool,
    ) -> None:
        request.add_parameter("To", to)
        request.add_parameter("Body", body)

        if from_:
            request.add_parameter("From", from_)
        if status_callback:
            request.add_parameter("StatusCallback", status_callback)
        request.add_parameter("StatusCallbackMethod", status_callback_method)
        request.add_parameter("AllowMultiple", bool(allow_multiple))

    @staticmethod
    def _set_params_for_list_sms_messages(
        request: RestRequest,
        to: str | None,
        from_: str | None,
        date_sent_gte: date | None,
        date_sent_lt: date | None,
        page: int | None,
        page_size: int | None,
    ) -> None:
        if to:
            request.add_query_parameter("To", to)
        if from_:
            request.add_query_parameter("From", from_)
        if date_sent_gte is not None:
            request.add_query_parameter("DateSent>", date_sent_gte.strftime(DATE_FORMAT))
        if date_sent_lt is not None:
            request.add_query_parameter("DateSent<", date_sent_lt.strftime(DATE_FORMAT))
        if page is not None:
            request.add_query_parameter("Page", page)
        if page_size is not None:
            request.add_query_parameter("PageSize", page_size)
