from __future__ import annotations
from typing import Dict, List, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from bolan_compare.model.models import Bank, RatioDiscountBoundary, Term
from bolan_compare.extraction.parsing import RateCellParser, normalize_label


class RowText(BaseModel):
    """表格的一列：第一格為標題，其餘為欄位儲存格文字"""
    title: str
    cells: List[str]


class ExtractionConfig(BaseModel):
    """單一網站的表格解析設定

    包含：
    - 定位表格的 CSS selector（錨點所在的 table 即為目標表格）
    - 表頭標題必須包含的成數關鍵字，用來自我檢查網頁結構
    - 每個表格對應的工會優惠旗標，長度即為預期的表格數量
    - 期限與成數區間的標籤對照表
    - 儲存格解析器
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    bank: Bank
    anchor_selector: str
    ltv_phrase: str
    union_discount_by_table: Tuple[bool, ...] = Field(min_length=1)
    term_labels: Dict[str, Term]
    boundary_labels: Dict[str, RatioDiscountBoundary]
    cell_parser: RateCellParser = Field(default_factory=RateCellParser)

    @field_validator("term_labels", "boundary_labels")
    @classmethod
    def _normalize_keys(cls, labels: Dict) -> Dict:
        # 查表時會先移除空白，key 也用同樣的形式
        return {normalize_label(label): value for label, value in labels.items()}

    @property
    def expected_table_count(self) -> int:
        return len(self.union_discount_by_table)
