from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence

import httpx

from cep_race.config import LookupSettings, load_settings
from cep_race.exceptions import LookupTimeoutError
from cep_race.metrics import InMemoryLookupMetricsCollector
from cep_race.models import NormalizedAddress
from cep_race.providers.factory import build_providers
from cep_race.race import RaceCoordinator

PROG = "cep-race"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG)
    parser.add_argument("cep", nargs="?", help="CEP to resolve, e.g. 01153000")
    return parser


def _print_usage() -> None:
    print(f"Uso: {PROG} <CEP>")
    print(f"Exemplo: {PROG} 01153000")


def _print_address(address: NormalizedAddress) -> None:
    print(f"API mais rápida: {address.source_name}")
    print(f"CEP: {address.postal_code}")
    print(f"Logradouro: {address.street}")
    print(f"Bairro: {address.district}")
    print(f"Cidade: {address.city}")
    print(f"Estado: {address.state}")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


async def run_lookup(
    cep: str,
    settings: LookupSettings,
    client_factory: Callable[[], httpx.AsyncClient] | None = None,
    metrics: InMemoryLookupMetricsCollector | None = None,
) -> NormalizedAddress:
    providers = build_providers(settings, metrics=metrics, client_factory=client_factory)
    coordinator = RaceCoordinator(providers, timeout_seconds=settings.TIMEOUT_SECONDS, metrics=metrics)
    return await coordinator.resolve(cep)


def main(argv: Sequence[str] | None = None) -> int:
    args, _ = _build_parser().parse_known_args(argv)
    if not args.cep:
        _print_usage()
        return 1

    settings = load_settings()
    _configure_logging(settings.LOG_LEVEL)
    try:
        address = asyncio.run(run_lookup(args.cep, settings))
    except LookupTimeoutError:
        print(
            "Erro: Timeout - nenhuma API respondeu em menos de "
            f"{settings.TIMEOUT_SECONDS:g} segundo(s)"
        )
        return 1
    _print_address(address)
    return 0


if __name__ == "__main__":
    sys.exit(main())
