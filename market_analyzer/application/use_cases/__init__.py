"""Application use cases package."""

from .add_account import AddAccountUseCase
from .analyze_account import AnalyzeAccountUseCase
from .export_report import ExportReportUseCase
from .get_accounts import GetAccountsUseCase

__all__ = [
    "AddAccountUseCase",
    "AnalyzeAccountUseCase",
    "ExportReportUseCase",
    "GetAccountsUseCase",
]
