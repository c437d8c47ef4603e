"""ValidationService — validator operations wrapped in ServiceResult.

Deprecation warnings raised while validating are collected into
``ServiceResult.warnings`` instead of going to the warnings machinery,
so callers see them as data. After a successful normalize the matching
plugin hook is fired through :func:`safe_emit`.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ilp_plugin_shared.domain.direction import uses_legacy_account
from ilp_plugin_shared.domain.types import Addressing, Flow
from ilp_plugin_shared.errors import InvalidFieldsError
from ilp_plugin_shared.services.result import ResultMeta, ServiceResult
from ilp_plugin_shared.util import safe_emit
from ilp_plugin_shared.validator import Validator

if TYPE_CHECKING:
    from ilp_plugin_shared.context import PluginContext
    from ilp_plugin_shared.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def _invalid(op: str, exc: InvalidFieldsError, **kwargs: Any) -> ServiceResult:
    logger.debug("%s rejected: %s", op, exc)
    return ServiceResult.rejected(op, exc, **kwargs)


class ValidationService:
    """Runs validator operations and reports them as ServiceResult.

    Parameters:
        plugin: The plugin context the validator reads account and prefix from.
        plugin_manager: Optional plugin manager whose hooks receive
            normalized objects.
    """

    def __init__(
        self,
        plugin: PluginContext,
        *,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        self._validator = Validator(plugin=plugin)
        self._plugin_manager = plugin_manager

    @property
    def validator(self) -> Validator:
        return self._validator

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------

    def validate_transfer(self, transfer: dict[str, Any], flow: Flow | str) -> ServiceResult:
        flow = Flow(flow)
        if flow is Flow.INCOMING:
            check = self._validator.validate_incoming_transfer
        else:
            check = self._validator.validate_outgoing_transfer

        def run() -> dict[str, Any]:
            check(transfer)
            return dict(transfer)

        return self._run("validate_transfer", flow, transfer, run)

    def normalize_transfer(self, transfer: dict[str, Any], flow: Flow | str) -> ServiceResult:
        flow = Flow(flow)
        if flow is Flow.INCOMING:
            normalize = self._validator.normalize_incoming_transfer
        else:
            normalize = self._validator.normalize_outgoing_transfer

        result = self._run("normalize_transfer", flow, transfer, lambda: normalize(transfer))
        if result.ok:
            self._emit(f"{flow}_transfer", transfer=result.data)
        return result

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def validate_message(self, message: dict[str, Any], flow: Flow | str) -> ServiceResult:
        flow = Flow(flow)
        if flow is Flow.INCOMING:
            check = self._validator.validate_incoming_message
        else:
            check = self._validator.validate_outgoing_message

        def run() -> dict[str, Any]:
            check(message)
            return dict(message)

        return self._run("validate_message", flow, message, run)

    def normalize_message(self, message: dict[str, Any], flow: Flow | str) -> ServiceResult:
        flow = Flow(flow)
        if flow is Flow.INCOMING:
            normalize = self._validator.normalize_incoming_message
        else:
            normalize = self._validator.normalize_outgoing_message

        result = self._run(
            "normalize_message", flow, message, lambda: dict(normalize(message))
        )
        if result.ok:
            self._emit(f"{flow}_message", message=result.data)
        return result

    # ------------------------------------------------------------------
    # Fulfillments
    # ------------------------------------------------------------------

    def validate_fulfillment(self, fulfillment: str) -> ServiceResult:
        op = "validate_fulfillment"
        try:
            self._validator.validate_fulfillment(fulfillment)
        except InvalidFieldsError as exc:
            return _invalid(op, exc)
        return ServiceResult(ok=True, op=op, data={"fulfillment": fulfillment})

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _run(
        self,
        op: str,
        flow: Flow,
        obj: Any,
        fn: Callable[[], dict[str, Any]],
    ) -> ServiceResult:
        """Call *fn*, turning InvalidFieldsError and deprecations into a result."""
        meta = ResultMeta(flow=flow)
        failure: InvalidFieldsError | None = None
        data: dict[str, Any] = {}
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", DeprecationWarning)
            try:
                data = fn()
            except InvalidFieldsError as exc:
                failure = exc

        # The same notice may be raised more than once in one call.
        found = list(
            dict.fromkeys(
                str(w.message) for w in caught if issubclass(w.category, DeprecationWarning)
            )
        )
        if failure is not None:
            return _invalid(op, failure, warnings=found, meta=meta)

        legacy = uses_legacy_account(obj)
        addressing = Addressing.LEGACY_ACCOUNT if legacy else Addressing.DIRECTED
        meta = ResultMeta(flow=flow, addressing=addressing)
        return ServiceResult(ok=True, op=op, data=data, warnings=found, meta=meta)

    def _emit(self, event: str, **payload: Any) -> None:
        if self._plugin_manager is None:
            return
        safe_emit(self._plugin_manager.hook, event, **payload)
