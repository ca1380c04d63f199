"""
Metric sources backing the sampler.

RpcBlockMetricSource reads the latest block header over Ethereum JSON-RPC.
StaticFeeSource replays a fixed sequence for dry runs and tests.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any, Dict, Iterable, Iterator, Optional, Protocol, runtime_checkable

import httpx

from src.core.config import BlockMetric, RpcConfig
from src.core.exceptions import ConfigurationError, SamplerError

logger = logging.getLogger(__name__)

_BLOCK_FIELDS = {
    BlockMetric.BASE_FEE: "baseFeePerGas",
    BlockMetric.GAS_LIMIT: "gasLimit",
    BlockMetric.GAS_USED: "gasUsed",
    BlockMetric.TX_COUNT: "transactions",
}


@runtime_checkable
class FeeSource(Protocol):
    """Port for reading the current value of the monitored metric."""

    def read(self) -> int:
        ...


def _parse_quantity(raw: Any, field: str) -> int:
    if not isinstance(raw, str) or not raw.startswith("0x"):
        raise SamplerError(f"Block field {field!r} is not a hex quantity: {raw!r}")
    try:
        return int(raw, 16)
    except ValueError as exc:
        raise SamplerError(f"Block field {field!r} is not a hex quantity: {raw!r}") from exc


def extract_metric(block: Dict[str, Any], metric: BlockMetric) -> int:
    """
    Extract a metric from a JSON-RPC block object.

    Raises:
        SamplerError: If the field is missing or malformed (e.g. baseFeePerGas
            on a pre-London block).
    """
    metric = BlockMetric(metric)
    field = _BLOCK_FIELDS[metric]
    if field not in block or block[field] is None:
        raise SamplerError(f"Block has no {field!r} field")

    if metric is BlockMetric.TX_COUNT:
        transactions = block[field]
        if not isinstance(transactions, list):
            raise SamplerError("Block 'transactions' field is not a list")
        return len(transactions)

    return _parse_quantity(block[field], field)


class RpcBlockMetricSource:
    """
    Reads a metric from the latest block via eth_getBlockByNumber.

    The client is created lazily unless one is supplied (tests pass a client
    built on httpx.MockTransport).
    """

    def __init__(
        self,
        rpc: Optional[RpcConfig] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.rpc = rpc or RpcConfig()
        if not self.rpc.url and client is None:
            raise ConfigurationError("RPC url is not configured (BASEFEE_TRAP_RPC__URL)")
        self._client = client
        self._ids = itertools.count(1)

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.rpc.timeout_seconds)
        return self._client

    def read(self) -> int:
        block = self._call("eth_getBlockByNumber", ["latest", False])
        if not isinstance(block, dict):
            raise SamplerError("eth_getBlockByNumber returned no block")
        value = extract_metric(block, self.rpc.metric)
        logger.debug("Read %s=%s from block %s", self.rpc.metric.value, value, block.get("number"))
        return value

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RpcBlockMetricSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _call(self, method: str, params: list) -> Any:
        request = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        try:
            response = self.client.post(self.rpc.url or "", json=request)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as exc:
            raise SamplerError(f"RPC request {method} failed: {exc}") from exc
        except ValueError as exc:
            raise SamplerError(f"RPC response for {method} is not JSON") from exc

        if not isinstance(body, dict):
            raise SamplerError(f"Unexpected RPC response for {method}: {body!r}")
        if body.get("error"):
            error = body["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise SamplerError(f"RPC error for {method}: {message}")
        if "result" not in body:
            raise SamplerError(f"RPC response for {method} has no result")
        return body["result"]


class StaticFeeSource:
    """Replays a fixed sequence of values, one per read()."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: Iterator[int] = iter(list(values))

    def read(self) -> int:
        try:
            return next(self._values)
        except StopIteration:
            raise SamplerError("Static source exhausted") from None
