from __future__ import annotations
from typing import List, Optional
from datetime import date, datetime
from bs4 import BeautifulSoup
from bs4.element import Tag

from bolan_compare.utils.logger import get_logger
from bolan_compare.model.models import (
    InterestRateRecord,
    ParseError,
    RateType,
    StructuralError,
)
from bolan_compare.extraction.models import ExtractionConfig, RowText
from bolan_compare.extraction.parsing import (
    get_all_text,
    parse_discount_boundaries,
    parse_term,
)

# 設定日誌
logger = get_logger(logger_level="INFO")


class ExtractionEngine:
    """利率表格解析引擎

    資料流程：
    1. 表格定位
       BeautifulSoup -> List[Tag]
       以 anchor_selector 找出錨點，往上取得所在的 <table>，
       數量必須與設定的表格數一致

    2. 列文字擷取
       Tag -> List[RowText]
       每列第一格為標題，其餘為欄位，文字皆經空白正規化

    3. 表格解析
       List[RowText] -> List[InterestRateRecord]
       第一列為表頭（成數區間），其餘每列為一個期限，
       每個 (期限, 欄位) 組合產生一筆資料

    備註：
    - 任何結構假設不成立就整個表格失敗，不回傳部分結果
    - 輸出順序：表格依定位順序，列由上而下，欄由左而右
    """

    def __init__(self, config: ExtractionConfig):
        self.config = config

    def locate_tables(self, soup: BeautifulSoup) -> List[Tag]:
        """找出所有目標表格

        Raises:
            StructuralError: 錨點不在表格內，或表格數量與預期不符
        """
        tables: List[Tag] = []
        for anchor in soup.select(self.config.anchor_selector):
            table = anchor.find_parent("table")
            if table is None:
                raise StructuralError(f"錨點不在任何表格內：'{get_all_text(anchor)}'")
            if not any(table is known for known in tables):
                tables.append(table)

        expected = self.config.expected_table_count
        if len(tables) != expected:
            raise StructuralError(
                f"預期找到 {expected} 個利率表格，實際找到 {len(tables)} 個"
                f"（selector：{self.config.anchor_selector}）"
            )
        logger.debug(f"🔍 找到 {len(tables)} 個利率表格")
        return tables

    @staticmethod
    def _direct_rows(table: Tag) -> List[Tag]:
        """只取表格本身的 <tr>，儲存格內的巢狀表格不計入"""
        rows: List[Tag] = []
        for child in table.find_all(["tr", "thead", "tbody", "tfoot"], recursive=False):
            if child.name == "tr":
                rows.append(child)
            else:
                rows.extend(child.find_all("tr", recursive=False))
        return rows

    def extract_rows(self, table: Tag) -> List[RowText]:
        """擷取表格每一列的標題與欄位文字"""
        rows: List[RowText] = []
        for index, tr in enumerate(self._direct_rows(table)):
            cells = tr.find_all(["td", "th"], recursive=False)
            if not cells:
                raise StructuralError(f"第 {index} 列沒有任何儲存格")
            rows.append(RowText(
                title=get_all_text(cells[0]),
                cells=[get_all_text(cell) for cell in cells[1:]],
            ))
        if not rows:
            raise StructuralError("表格沒有任何列")
        return rows

    def parse_table(
        self,
        table: Tag,
        *,
        union_discount: bool,
        crawled_at: datetime,
        changed_on: Optional[date] = None,
    ) -> List[InterestRateRecord]:
        """解析單一表格為利率資料

        Args:
            table: 目標 <table>
            union_discount: 此表格是否為工會優惠利率
            crawled_at: 本次爬取時間
            changed_on: 利率變更日，未提供時使用爬取當天

        Raises:
            StructuralError: 表頭或列標題與預期不符、欄位數不一致
            ParseError: 儲存格無法解析為利率
        """
        rows = self.extract_rows(table)
        header, body = rows[0], rows[1:]

        if self.config.ltv_phrase not in header.title:
            raise StructuralError(
                f"表頭 '{header.title}' 不含 '{self.config.ltv_phrase}'，網頁結構似乎已變更，需要更新解析器"
            )
        boundaries = parse_discount_boundaries(header.cells, self.config.boundary_labels)
        if not boundaries:
            raise StructuralError("表頭沒有任何成數區間欄位")

        changed_on = changed_on or crawled_at.date()
        records: List[InterestRateRecord] = []
        for row in body:
            term = parse_term(row.title, self.config.term_labels)
            if len(row.cells) != len(boundaries):
                raise StructuralError(
                    f"'{row.title}' 有 {len(row.cells)} 個欄位，表頭有 {len(boundaries)} 個"
                )
            for boundary, cell in zip(boundaries, row.cells):
                try:
                    nominal, effective = self.config.cell_parser(cell)
                except ParseError as e:
                    raise ParseError(f"'{row.title}' 的利率解析失敗：{e.message}") from e
                records.append(InterestRateRecord(
                    bank=self.config.bank,
                    nominal_rate=nominal,
                    effective_rate=effective,
                    term=term,
                    rate_type=RateType.RATIO_DISCOUNTED,
                    discount_boundary=boundary,
                    union_discount=union_discount,
                    changed_on=changed_on,
                    last_crawled_at=crawled_at,
                ))
        return records

    def extract(
        self,
        soup: BeautifulSoup,
        crawled_at: datetime,
        *,
        skip_broken_tables: bool = False,
        changed_on: Optional[date] = None,
    ) -> List[InterestRateRecord]:
        """定位並解析所有表格，依定位順序串接結果

        Args:
            soup: 網頁 HTML 解析樹
            crawled_at: 本次爬取時間，所有資料共用
            skip_broken_tables: 為 True 時略過解析失敗的表格（記錄日誌），
                否則第一個失敗的表格直接拋出例外
            changed_on: 利率變更日

        Raises:
            StructuralError: 表格定位失敗（不受 skip_broken_tables 影響）
        """
        tables = self.locate_tables(soup)
        records: List[InterestRateRecord] = []
        for index, (table, union_discount) in enumerate(zip(tables, self.config.union_discount_by_table)):
            try:
                table_records = self.parse_table(
                    table,
                    union_discount=union_discount,
                    crawled_at=crawled_at,
                    changed_on=changed_on,
                )
            except (StructuralError, ParseError) as e:
                if not skip_broken_tables:
                    raise
                logger.error(f"❌ 第 {index + 1} 個表格解析失敗，略過：{e.message}")
                continue
            logger.debug(f"📊 第 {index + 1} 個表格解析出 {len(table_records)} 筆資料")
            records.extend(table_records)
        return records
