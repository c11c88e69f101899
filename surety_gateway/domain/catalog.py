"""Fixed vocabularies: financial line items and the 5C question catalog"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class LineItem(str, Enum):
    """Balance sheet / income statement line items, valued by their form labels"""

    # Current assets
    CASH = "Kas dan Setara Kas"
    INVENTORY = "Persediaan"
    PREPAID_EXPENSES = "Biaya dibayar dimuka"
    DEPOSITS = "Jaminan"
    UNBILLED_RECEIVABLES = "Piutang belum dikwitansikan"

    # Non-current assets
    FIXED_ASSETS_NET = "Aset Tetap - Bersih"
    TRADE_RECEIVABLES = "Piutang Dagang"
    WORK_IN_PROGRESS = "Work in Progress"
    PREPAID_TAXES = "Pajak dibayar dimuka"
    SHORT_TERM_INVESTMENTS = "Investasi Jangka Pendek"

    # Current liabilities
    TRADE_PAYABLES = "Utang usaha"
    TAXES_PAYABLE = "Utang pajak"
    UNEARNED_REVENUE = "Pendapatan diterima dimuka"
    FINANCING_COMPANY_LOANS = "Utang lembaga pembiayaan"
    BANK_LOANS_CURRENT = "Utang bank (lancar)"
    OTHER_PAYABLES = "Utang lain-lain"

    # Long-term liabilities
    BANK_LOANS_LONG_TERM = "Utang bank (jbg panjang)"
    POST_EMPLOYMENT_BENEFITS = "Liabilitas Imbalan Pascakerja"
    SHAREHOLDER_LOANS = "Utang kepada pemegang saham"
    RELATED_PARTY_LOANS = "Utang kepada pihak berelasi"
    FINANCE_LEASES = "Utang sewa pembiayaan"
    CUSTOMER_ADVANCES = "Utang muka pelanggan"

    # Equity and other
    PAID_IN_CAPITAL = "Modal disetor"
    RETAINED_EARNINGS = "Laba ditahan"
    OTHER_EQUITY = "Komponen ekuitas lain"
    TAX_AMNESTY_ASSETS = "Aset tax amnesty"
    NET_PROFIT = "Laba tahun berjalan"
    SALES = "Penjualan (Sales)"


CURRENT_ASSET_ITEMS: Tuple[LineItem, ...] = (
    LineItem.CASH,
    LineItem.INVENTORY,
    LineItem.PREPAID_EXPENSES,
    LineItem.DEPOSITS,
    LineItem.UNBILLED_RECEIVABLES,
)

NON_CURRENT_ASSET_ITEMS: Tuple[LineItem, ...] = (
    LineItem.FIXED_ASSETS_NET,
    LineItem.TRADE_RECEIVABLES,
    LineItem.WORK_IN_PROGRESS,
    LineItem.PREPAID_TAXES,
    LineItem.SHORT_TERM_INVESTMENTS,
)

CURRENT_LIABILITY_ITEMS: Tuple[LineItem, ...] = (
    LineItem.TRADE_PAYABLES,
    LineItem.TAXES_PAYABLE,
    LineItem.UNEARNED_REVENUE,
    LineItem.FINANCING_COMPANY_LOANS,
    LineItem.BANK_LOANS_CURRENT,
    LineItem.OTHER_PAYABLES,
)

LONG_TERM_LIABILITY_ITEMS: Tuple[LineItem, ...] = (
    LineItem.BANK_LOANS_LONG_TERM,
    LineItem.POST_EMPLOYMENT_BENEFITS,
    LineItem.SHAREHOLDER_LOANS,
    LineItem.RELATED_PARTY_LOANS,
    LineItem.FINANCE_LEASES,
    LineItem.CUSTOMER_ADVANCES,
)

EQUITY_AND_OTHER_ITEMS: Tuple[LineItem, ...] = (
    LineItem.PAID_IN_CAPITAL,
    LineItem.RETAINED_EARNINGS,
    LineItem.OTHER_EQUITY,
    LineItem.TAX_AMNESTY_ASSETS,
    LineItem.NET_PROFIT,
    LineItem.SALES,
)

ASSET_ITEMS = CURRENT_ASSET_ITEMS + NON_CURRENT_ASSET_ITEMS
LIABILITY_ITEMS = CURRENT_LIABILITY_ITEMS + LONG_TERM_LIABILITY_ITEMS
PROFIT_ITEM = LineItem.NET_PROFIT
SALES_ITEM = LineItem.SALES

# Titled groups in the order the statement form presents them
STATEMENT_GROUPS: Tuple[Tuple[str, Tuple[LineItem, ...]], ...] = (
    ("ASET - Aktiva Lancar", CURRENT_ASSET_ITEMS),
    ("ASET - Aktiva Tidak Lancar", NON_CURRENT_ASSET_ITEMS),
    ("KEWAJIBAN Jangka Pendek", CURRENT_LIABILITY_ITEMS),
    ("KEWAJIBAN Jangka Panjang", LONG_TERM_LIABILITY_ITEMS),
    ("EKUITAS & LAINNYA", EQUITY_AND_OTHER_ITEMS),
)


class Section(str, Enum):
    """Questionnaire sections of the 5C assessment"""

    CAPACITY = "capacity"  # technical capacity, informational only
    CHARACTER = "character"
    CAPITAL = "capital"
    CONDITION = "condition"


@dataclass(frozen=True)
class AnswerOption:
    letter: str
    label: str


@dataclass(frozen=True)
class Question:
    """Form question; its weight lives in the scoring policy, not here"""

    key: str
    title: str
    options: Tuple[AnswerOption, ...]


def _options(*pairs: Tuple[str, str]) -> Tuple[AnswerOption, ...]:
    return tuple(AnswerOption(letter=letter, label=label) for letter, label in pairs)


QUESTIONS: Dict[Section, Tuple[Question, ...]] = {
    Section.CAPACITY: (
        Question("q1", "1. Pengalaman Terhadap Jenis Pekerjaan",
                 _options(("A", "A: >4 proyek"), ("B", "B: 1-4 proyek"), ("C", "C: Belum pernah"))),
        Question("q2", "2. Tenaga Ahli sesuai proyek",
                 _options(("A", "A: >5 orang"), ("B", "B: 2-5 orang"), ("C", "C: <2 orang"))),
        Question("q3", "3. Proyek Lain yang Sedang Dikerjakan",
                 _options(("A", "A: Tidak ada"), ("B", "B: 1-2 proyek"), ("C", "C: >2 proyek"))),
        Question("q4", "4. Peralatan Untuk Mengerjakan Proyek",
                 _options(("A", "A: Cukup, Milik sendiri"), ("B", "B: Milik + Sewa"), ("C", "C: Sewa"))),
    ),
    Section.CHARACTER: (
        Question("q1", "1. Lama Operasional Usaha",
                 _options(("A", "A: > 10 tahun"), ("B", "B: 5-10 tahun"), ("C", "C: <5 tahun"))),
        Question("q2", "2. Hubungan dengan Obligee",
                 _options(("A", "A: >2 Obligee"), ("B", "B: 2 Obligee"), ("C", "C: 1 Obligee"))),
        Question("q3", "3. Lama Berhubungan dengan Obligee",
                 _options(("A", "A: > 5 tahun"), ("B", "B: 2-5 tahun"), ("C", "C: <2 tahun"))),
        Question("q4", "4. Indemnity Agreement",
                 _options(("A", "A: Dirut"), ("B", "B: Surat Kuasa"))),
        Question("q5", "5. Legalitas Indemnity Agreement",
                 _options(("A", "A: Notariil"), ("B", "B: Bermaterai"), ("C", "C: Tidak Bermaterai"))),
    ),
    Section.CAPITAL: (
        Question("q1", "1. Ratio Likuiditas (Aktiva Lancar/Kewajiban Lancar)",
                 _options(("A", "A: Baik (>120%)"), ("B", "B: Cukup (100-120%)"), ("C", "C: Kurang (<100%)"))),
        Question("q2", "2. Ratio Rentabilitas (Laba/Ekuitas)",
                 _options(("A", "A: Profit Tinggi"), ("B", "B: Profit Sedang"), ("C", "C: Rugi/Kecil"))),
        Question("q3", "3. Ratio Solvabilitas (Total Kewajiban/Ekuitas)",
                 _options(("A", "A: Sehat (<100%)"), ("B", "B: Wajar (100-200%)"), ("C", "C: Berisiko (>200%)"))),
        Question("q4", "4. Ekuitas vs Nilai Proyek",
                 _options(("A", "A: Kuat"), ("B", "B: Cukup"), ("C", "C: Lemah"))),
        Question("q5", "5. Audit Laporan Keuangan",
                 _options(("A", "A: Auditor Terdaftar"), ("B", "B: Non Audit"), ("C", "C: Tidak Ada"))),
        Question("q6", "6. Sumber Dana Pelaksanaan",
                 _options(("A", "A: Sendiri + Luar"), ("B", "B: Sendiri"), ("C", "C: Dana Luar"))),
    ),
    Section.CONDITION: (
        Question("q1", "1. Jenis Pekerjaan",
                 _options(("A", "A: Mudah"), ("B", "B: Sedang"), ("C", "C: Sulit"))),
        Question("q2", "2. Periode Kontrak Proyek",
                 _options(("A", "A: <1 tahun"), ("B", "B: s/d 1 tahun"), ("C", "C: >1 tahun"))),
        Question("q3", "3. Lokasi Proyek vs Kantor",
                 _options(("A", "A: Provinsi sama"), ("B", "B: Provinsi lain"), ("C", "C: Luar Negeri"))),
        Question("q4", "4. Supply Bahan Baku",
                 _options(("A", "A: Lokal"), ("B", "B: Campuran"), ("C", "C: Luar"))),
    ),
}
