"""Application use cases package."""

from .backups import ExportBackupUseCase, ImportBackupUseCase
from .get_dashboard_summary import GetDashboardSummaryUseCase
from .record_finance_entry import RecordFinanceEntryUseCase
from .record_transaction import RecordCustomerTransactionUseCase
from .register_customer import RegisterCustomerUseCase, RenameCustomerUseCase
from .select_data_folder import (
    DesktopCapabilityUnavailable,
    SelectDataFolderUseCase,
)
from .update_shop_profile import UpdateShopProfileUseCase
from .work_orders import ChangeOrderStatusUseCase, CreateWorkOrderUseCase

__all__ = [
    "ExportBackupUseCase",
    "ImportBackupUseCase",
    "GetDashboardSummaryUseCase",
    "RecordFinanceEntryUseCase",
    "RecordCustomerTransactionUseCase",
    "RegisterCustomerUseCase",
    "RenameCustomerUseCase",
    "DesktopCapabilityUnavailable",
    "SelectDataFolderUseCase",
    "UpdateShopProfileUseCase",
    "ChangeOrderStatusUseCase",
    "CreateWorkOrderUseCase",
]
