"""
Fuzzy present-value model for coupon bonds.

This module contains the BondValuation class that discounts the cash flows of
a coupon bond at imprecise (triangular fuzzy) rates and reports the resulting
fuzzy present value together with its defuzzified metrics.
"""

from __future__ import annotations
from typing import Dict, List, Tuple, Optional, Any, Union

import logging
from decimal import Decimal
from time import perf_counter

from .data import BondParams
from .defuzz import expected, plot, risk, width
from .errors import ConfigurationError, UndefinedResultError
from .fuzzy import Fuzzy


class BondValuation:
    """
    Present value of a coupon bond under fuzzy discount rates.

    Each period ``k`` (1-based) pays the coupon, the last one also repays the
    face value. The cash flow is discounted with its own fuzzy rate:

        PV = sum_k CF_k / (1 + r_k) ** k

    and the arithmetic is carried out cut by cut on the rates' alpha-cuts.

    Usage:
        params = build_bond_instance()
        valuation = BondValuation(params)
        pv = valuation.present_value()
        summary = valuation.extract_result(pv)
    """

    def __init__(
        self,
        params: BondParams,
        *,
        logging_enabled: bool = False,
        log_level: Union[int, str] = "INFO",
        log_file: Optional[str] = None,
        strict_validation: bool = False,
    ) -> None:
        self.params = params
        self._strict_validation = strict_validation

        self._logger = self._configure_logger(logging_enabled, log_level, log_file)
        self._logging_enabled = logging_enabled
        self._log_level = log_level
        self._log_file = log_file

        validation_start = perf_counter()
        self._log_info(
            "input_validation_start",
            periods=self.params.periods,
            face_value=self.params.face_value,
        )
        self._validate_inputs()
        self._log_info(
            "input_validation_complete",
            elapsed_seconds=round(perf_counter() - validation_start, 4),
        )

    def configure_logging(
        self,
        *,
        enabled: bool,
        log_level: Union[int, str] = "INFO",
        log_file: Optional[str] = None,
    ) -> None:
        """
        Reconfigure logging for the current instance.
        """
        self._logger = self._configure_logger(enabled, log_level, log_file)
        self._logging_enabled = enabled
        self._log_level = log_level
        self._log_file = log_file

    # ---------- Logging helpers ----------
    def _configure_logger(
        self,
        enabled: bool,
        log_level: Union[int, str],
        log_file: Optional[str],
    ) -> logging.Logger:
        logger_name = f"fuzzy_intervals.model.{id(self)}"
        logger = logging.getLogger(logger_name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        if not enabled:
            logger.addHandler(logging.NullHandler())
            logger.setLevel(logging.CRITICAL)
            logger.propagate = False
            return logger

        level = self._resolve_log_level(log_level)
        logger.setLevel(level)

        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.propagate = False
        return logger

    @staticmethod
    def _resolve_log_level(log_level: Union[int, str]) -> int:
        if isinstance(log_level, int):
            return log_level
        if isinstance(log_level, str):
            level = logging.getLevelName(log_level.upper())
            if isinstance(level, int):
                return level
        return logging.INFO

    def _log(self, level: int, message: str, **fields: Any) -> None:
        if not getattr(self, "_logging_enabled", False):
            return
        if fields:
            kv = " ".join(f"{key}={value}" for key, value in fields.items())
            message = f"{message} | {kv}"
        self._logger.log(level, message)

    def _log_debug(self, message: str, **fields: Any) -> None:
        self._log(logging.DEBUG, message, **fields)

    def _log_info(self, message: str, **fields: Any) -> None:
        self._log(logging.INFO, message, **fields)

    def _log_warning(self, message: str, **fields: Any) -> None:
        self._log(logging.WARNING, message, **fields)

    # ---------- Validation ----------
    def _validate_inputs(self) -> None:
        strict = getattr(self, "_strict_validation", False)

        def warn_or_raise(code: str, message: str, suggestion: Optional[str] = None, **fields: Any) -> None:
            payload = dict(fields)
            if suggestion:
                payload["suggestion"] = suggestion
            self._log_warning(code, **payload)
            if strict:
                detail = message
                if suggestion:
                    detail = f"{detail} Suggested fix: {suggestion}"
                raise ConfigurationError(detail)

        for period, rate in enumerate(self.params.rates, start=1):
            if 1 + rate.low <= 0:
                self._log_warning("validation_non_positive_discount_base", period=period, low=rate.low)
                raise ConfigurationError(
                    f"Rate for period {period} allows 1 + rate <= 0 (low={rate.low}). "
                    "Discount rates must stay above -100%."
                )

            if rate.high > 1:
                warn_or_raise(
                    "validation_rate_above_unity",
                    f"Rate for period {period} reaches {rate.high}, i.e. more than 100% per period.",
                    suggestion="Express rates as fractions (0.05 for 5%).",
                    period=period,
                    high=rate.high,
                )
            if rate.low == rate.high:
                warn_or_raise(
                    "validation_crisp_rate",
                    f"Rate for period {period} has zero spread and carries no uncertainty.",
                    suggestion="Widen RateSpec.low/high or accept a crisp contribution.",
                    period=period,
                    value=rate.mode,
                )

        self._log_debug(
            "validation_complete_success",
            periods=self.params.periods,
            coupon=self.params.coupon,
            strict=strict,
        )

    # ---------- Valuation ----------
    def cash_flows(self) -> List[Tuple[int, Decimal]]:
        """Crisp cash flow per period as ``(period, amount)`` pairs."""
        coupon = self.params.coupon
        last = self.params.periods
        flows = [(k, coupon) for k in range(1, last)]
        flows.append((last, coupon + self.params.face_value))
        return flows

    def discount_factor(self, period: int) -> Fuzzy:
        """Fuzzy compounding factor ``(1 + r_k) ** k`` for a 1-based period."""
        if not 1 <= period <= self.params.periods:
            raise ConfigurationError(
                f"Period {period} is outside 1..{self.params.periods}."
            )
        rate = self.params.rates[period - 1].to_fuzzy()
        return Fuzzy.pow(1 + rate, period)

    def present_value(self) -> Fuzzy:
        """
        Discount every cash flow and add up the fuzzy terms.

        Returns
        -------
        Fuzzy
            Fuzzy present value; its bottom cut is the widest plausible range,
            its top cut the value at the most plausible rates.
        """
        start = perf_counter()
        self._log_info("present_value_start", periods=self.params.periods)

        total: Optional[Fuzzy] = None
        for period, amount in self.cash_flows():
            term = amount / self.discount_factor(period)
            self._log_debug(
                "present_value_term",
                period=period,
                amount=amount,
                bottom=term.bottom,
                top=term.top,
            )
            total = term if total is None else total + term

        self._log_info(
            "present_value_complete",
            bottom=total.bottom,
            top=total.top,
            elapsed_seconds=round(perf_counter() - start, 4),
        )
        return total

    def extract_result(self, pv: Optional[Fuzzy] = None) -> Dict[str, Any]:
        """
        Structured summary of a present value.

        Parameters
        ----------
        pv : Optional[Fuzzy]
            A value returned by :meth:`present_value`; computed when omitted.

        Returns
        -------
        Dict[str, Any]
            Bounds, defuzzified metrics, plot points and cash flows, suitable
            for serialization or visualization.
        """
        if pv is None:
            pv = self.present_value()

        try:
            pv_risk: Optional[Decimal] = risk(pv)
        except UndefinedResultError as exc:
            self._log_warning("risk_undefined", reason=str(exc))
            pv_risk = None

        result = {
            "bottom": (pv.bottom.low, pv.bottom.high),
            "top": (pv.top.low, pv.top.high),
            "width": width(pv),
            "risk": pv_risk,
            "expected": expected(pv),
            "plot": plot(pv),
            "cash_flows": self.cash_flows(),
        }
        self._log_info(
            "result_extracted",
            width=result["width"],
            risk=result["risk"],
            expected=result["expected"],
        )
        return result
