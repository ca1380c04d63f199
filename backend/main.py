"""
Local dry-run harness for the base fee trap.

Drives the two-call trap contract the way an operator would: collect() once
per iteration, keep a newest-first buffer of encoded samples, call
should_respond() and forward triggered payloads to the emitter. Values can be
replayed from the command line or read live from a JSON-RPC endpoint.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections import deque
from typing import Callable, Deque, List, Optional, Sequence, Tuple

from dotenv import load_dotenv
from pydantic import ValidationError

from backend.emitter import ResponseEmitter
from src.core.config import BlockMetric, SampleEncoding, ThresholdSource, TrapConfig, config
from src.core.exceptions import DecodingError, TrapError
from src.core.logging_config import setup_logging
from src.trap import BaseFeeTrap, FeeSource, RpcBlockMetricSource, StaticFeeSource, Trap
from src.trap.encoding import decode_alert_payload
from src.trap.schema import SENTINEL_PAYLOADS

logger = logging.getLogger("backend")


def describe_payload(payload: bytes) -> str:
    if payload in SENTINEL_PAYLOADS:
        return payload.decode("utf-8")
    try:
        alert = decode_alert_payload(payload)
    except DecodingError:
        return f"0x{payload.hex()}"
    return f"{alert.label}: {alert.previous} -> {alert.current} ({alert.percent_change}%)"


def run_dry_run(
    trap: Trap,
    emitter: ResponseEmitter,
    iterations: int,
    interval: float = 0.0,
    depth: int = 2,
    sleep: Callable[[float], None] = time.sleep,
) -> List[Tuple[bool, bytes]]:
    """
    Run collect/should_respond cycles.

    Args:
        trap: Any object implementing the Trap contract
        emitter: Sink for triggered payloads
        iterations: Number of collect() calls
        interval: Seconds to wait between iterations
        depth: Rolling buffer depth handed to should_respond()
        sleep: Sleep function (overridable in tests)

    Returns:
        (triggered, payload) for every iteration, in order.
    """
    buffer: Deque[bytes] = deque(maxlen=depth)
    results: List[Tuple[bool, bytes]] = []

    for i in range(iterations):
        if i and interval > 0:
            sleep(interval)

        buffer.appendleft(trap.collect())
        triggered, payload = trap.should_respond(list(buffer))
        results.append((triggered, payload))

        logger.info("[%d] triggered=%s %s", i, triggered, describe_payload(payload))
        if triggered:
            emitter.emit_signal(payload)

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Base fee volatility trap dry run")
    parser.add_argument("--values", type=int, nargs="+", help="Replay these metric values instead of RPC")
    parser.add_argument("--rpc-url", default=config.rpc.url, help="Ethereum JSON-RPC endpoint")
    parser.add_argument(
        "--metric",
        choices=[m.value for m in BlockMetric],
        default=config.rpc.metric.value,
    )
    parser.add_argument("--iterations", type=int, default=None)
    parser.add_argument("--interval", type=float, default=None, help="Seconds between samples")
    parser.add_argument("--threshold", type=int, default=config.trap.threshold_percent)
    parser.add_argument(
        "--encoding",
        choices=[e.value for e in SampleEncoding],
        default=config.trap.encoding.value,
    )
    parser.add_argument(
        "--threshold-source",
        choices=[s.value for s in ThresholdSource],
        default=config.trap.threshold_source.value,
    )
    parser.add_argument("--log-level", default=config.log_level)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging("backend", level=args.log_level)
    setup_logging("src", level=args.log_level)

    try:
        settings = TrapConfig.model_validate(
            {
                **config.trap.model_dump(),
                "threshold_percent": args.threshold,
                "encoding": args.encoding,
                "threshold_source": args.threshold_source,
            }
        )
    except ValidationError as exc:
        logger.error("Invalid trap settings: %s", exc)
        return 2

    source: Optional[FeeSource] = None
    try:
        if args.values:
            source = StaticFeeSource(args.values)
            iterations = len(args.values) if args.iterations is None else args.iterations
            interval = 0.0 if args.interval is None else args.interval
        else:
            rpc = config.rpc.model_copy(update={"url": args.rpc_url, "metric": BlockMetric(args.metric)})
            source = RpcBlockMetricSource(rpc)
            iterations = 10 if args.iterations is None else args.iterations
            interval = 12.0 if args.interval is None else args.interval

        logger.info(
            "Dry run: %d iterations, threshold %s%% (%s), encoding %s",
            iterations,
            settings.threshold_percent,
            settings.threshold_version,
            settings.encoding.value,
        )
        trap = BaseFeeTrap(source, settings)
        run_dry_run(trap, ResponseEmitter(), iterations, interval, settings.buffer_depth)
    except (TrapError, ValidationError) as exc:
        logger.error("Dry run failed: %s", exc)
        return 1
    finally:
        if isinstance(source, RpcBlockMetricSource):
            source.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
