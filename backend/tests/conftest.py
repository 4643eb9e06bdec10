import asyncio
import inspect
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.config import AppSettings  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the suite."""

    config.addinivalue_line("markers", "asyncio: mark test as running in an asyncio event loop")


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute async test functions without requiring pytest-asyncio."""

    test_function = pyfuncitem.obj
    if inspect.iscoroutinefunction(test_function):
        loop = asyncio.new_event_loop()
        try:
            asyncio.set_event_loop(loop)
            kwargs = {name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames}
            loop.run_until_complete(test_function(**kwargs))
        finally:
            asyncio.set_event_loop(None)
            loop.close()
        return True
    return None


@pytest.fixture()
def settings(tmp_path: pathlib.Path) -> AppSettings:
    """Settings isolated from the environment and any local .env file."""

    return AppSettings(
        _env_file=None,
        ido_base_url="https://erp.example.com/IDORequestService/ido",
        ido_token="secret-token",
        ido_config_name="TEST_CONFIG",
        static_dir=str(tmp_path / "public"),
    )


@pytest.fixture()
def order_items() -> list[dict[str, object]]:
    return [
        {"RecordDate": "2024-01-05 00:00:00", "ExtendedPrice": "100.50", "WBItProductCode": "SV"},
        {"RecordDate": "2024-01-05 00:00:00", "ExtendedPrice": "50", "WBItProductCode": "WIDGET"},
        {"RecordDate": "2024-01-06 08:30:00", "ExtendedPrice": "25.25", "WBItProductCode": None},
        {"RecordDate": None, "ExtendedPrice": "999", "WBItProductCode": "SV"},
        {"RecordDate": "2024-01-06 09:00:00", "ExtendedPrice": "n/a", "WBItProductCode": "SV"},
    ]


@pytest.fixture()
def ledger_items() -> list[dict[str, object]]:
    return [
        {
            "FRDerInvDate": "2024-02-01 12:00:00",
            "DomAmount": "-75",
            "FRDerDescription": "Freight Charge",
            "DerItemProductCode": "SV",
        },
        {
            "FRDerInvDate": "2024-02-01 12:00:00",
            "DomAmount": "20",
            "FRDerDescription": "Misc handling",
        },
        {
            "FRDerInvDate": "2024-02-01 12:00:00",
            "DomAmount": "300",
            "FRDerDescription": "Invoice 1001",
            "DerItemProductCode": "",
            "ItemProductCode": "svr",
        },
        {
            "FRDerInvDate": "2024-02-02 00:00:00",
            "DomAmount": "-120.40",
            "FRDerDescription": "Invoice 1002",
            "NonInvItemProductCode": "HW",
        },
        {
            "FRDerInvDate": "2024-02-02 00:00:00",
            "DomAmount": "0.00",
            "FRDerDescription": "Offset entry",
        },
    ]
