"""Configuration management."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

from waves_trade.api.dispatcher import DEFAULT_TIMEOUT
from waves_trade.models import AssetPair

load_dotenv(override=True)

DEFAULT_NODE = "https://testnode1.wavesnodes.com"
DEFAULT_CONFIG_FILE = Path(__file__).parent.parent.parent.parent / "config" / "node.yaml"


def parse_timeout(value) -> float | None:
    """解析逾時設定 (秒)，'none' 表示不設逾時"""
    if value is None or (isinstance(value, str) and value.strip().lower() in ("", "none")):
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"無效的逾時設定: {value!r}") from e
    if timeout <= 0:
        raise ValueError(f"逾時設定必須大於 0: {value!r}")
    return timeout


class Config:
    """統一配置管理類別 - 整合環境變數和 YAML 配置"""

    def __init__(self, config_path: str | Path | None = None):
        """初始化配置

        配置會從以下來源載入（後者覆蓋前者）：
        1. YAML 配置檔（NODE_CONFIG 或 config/node.yaml）- 節點與撮合設定
        2. 環境變數（.env）- NODE_URL、NODE_TIMEOUT
        """
        self.node_url: str = DEFAULT_NODE
        self.timeout: float | None = DEFAULT_TIMEOUT
        self.default_pair: AssetPair | None = None

        # === YAML 配置 ===
        explicit = config_path or os.environ.get("NODE_CONFIG")
        if explicit:
            self._load_yaml_config(Path(explicit))
        elif DEFAULT_CONFIG_FILE.exists():
            self._load_yaml_config(DEFAULT_CONFIG_FILE)

        # === 環境配置 ===
        if os.environ.get("NODE_URL"):
            self.node_url = os.environ["NODE_URL"]
        if "NODE_TIMEOUT" in os.environ:
            self.timeout = parse_timeout(os.environ["NODE_TIMEOUT"])

    def _load_yaml_config(self, config_file: Path):
        """載入 YAML 配置"""
        with open(config_file, encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}

        node = config_data.get("node") or {}
        self.node_url = node.get("url", self.node_url)
        if "timeout" in node:
            self.timeout = parse_timeout(node["timeout"])

        # 撮合預設交易對（可選）
        pair = (config_data.get("matcher") or {}).get("default_pair")
        if pair:
            self.default_pair = AssetPair(
                amount_asset=pair.get("amount_asset"),
                price_asset=pair.get("price_asset"),
            )

    def __repr__(self) -> str:
        """返回配置摘要"""
        timeout_display = f"{self.timeout}s" if self.timeout is not None else "無"
        pair_display = self.default_pair.path if self.default_pair else "未設定"
        return (
            f"Config(\n"
            f"  節點: {self.node_url}\n"
            f"  逾時: {timeout_display}\n"
            f"  預設交易對: {pair_display}\n"
            f")"
        )
