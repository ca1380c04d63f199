"""
Application configuration for the base fee volatility trap.

Provides environment-aware settings with conservative defaults. The volatility
threshold is explicit configuration injected into the trap, never a hidden
literal, so boundary values can be exercised in tests.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SampleEncoding(str, Enum):
	"""Binary layout of an encoded sample."""

	VALUE = "value"
	VALUE_THRESHOLD = "value_threshold"


class ThresholdSource(str, Enum):
	"""Where the decision rule reads its threshold from."""

	CONFIG = "config"
	SAMPLE = "sample"


class BlockMetric(str, Enum):
	"""Block header metrics a trap can monitor."""

	BASE_FEE = "base_fee"
	GAS_LIMIT = "gas_limit"
	GAS_USED = "gas_used"
	TX_COUNT = "tx_count"


class TrapConfig(BaseModel):
	"""
	Decision rule configuration.

	Notes:
	- threshold_percent: percent change (integer) at or above which the trap fires.
	- threshold_version: label identifying the threshold revision in use.
	- encoding: sample layout shared by collect() and should_respond().
	- threshold_source: 'config' uses threshold_percent; 'sample' uses the
	  threshold embedded in the previous sample (value_threshold encoding only).
	- buffer_depth: number of samples the operator hands to should_respond().
	"""

	threshold_percent: int = Field(2, ge=0, description="Percent change that triggers a response")
	threshold_version: str = Field("v1", min_length=1)
	encoding: SampleEncoding = SampleEncoding.VALUE
	threshold_source: ThresholdSource = ThresholdSource.CONFIG
	alert_label: str = Field("Basefee spike", min_length=1)
	buffer_depth: int = Field(2, ge=2)

	@model_validator(mode="after")
	def _check_threshold_source(self) -> "TrapConfig":
		if (
			self.threshold_source is ThresholdSource.SAMPLE
			and self.encoding is not SampleEncoding.VALUE_THRESHOLD
		):
			raise ValueError("threshold_source=sample requires encoding=value_threshold")
		return self


class RpcConfig(BaseModel):
	"""
	JSON-RPC sampler configuration.
	"""

	url: Optional[str] = Field(None, description="Ethereum JSON-RPC endpoint")
	timeout_seconds: float = Field(10.0, gt=0.0)
	metric: BlockMetric = BlockMetric.BASE_FEE


class Config(BaseSettings):
	"""
	Global configuration with environment overrides.
	"""

	model_config = SettingsConfigDict(
		env_prefix="BASEFEE_TRAP_",
		env_file=".env",
		env_nested_delimiter="__",
		extra="ignore",
	)

	log_level: str = Field("INFO", description="Default logging level")
	logs_dir: Path = Field(Path("logs"), description="Directory for log files")
	trap: TrapConfig = TrapConfig()
	rpc: RpcConfig = RpcConfig()

	def model_post_init(self, __context: object) -> None:
		self.logs_dir.mkdir(parents=True, exist_ok=True)


config = Config()
