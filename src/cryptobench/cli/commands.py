"""CLI command implementations for the crypto benchmark engine."""

from __future__ import annotations

import asyncio
import json
import signal
from typing import TYPE_CHECKING

import click

from cryptobench.core.formatting import describe_difference, format_time, performance_metrics
from cryptobench.core.insights import performance_insights
from cryptobench.core.security_estimation import estimate_security, known_key_sizes
from cryptobench.models.config import MAX_BATCH_SIZE, MAX_DATA_SIZE, MIN_DATA_SIZE, Config
from cryptobench.models.test_result import TimingPolicy
from cryptobench.utils.cancellation import CancellationToken
from cryptobench.utils.logger import configure_logging

if TYPE_CHECKING:
    from cryptobench.models.batch import BatchProgress, BatchResults, PhaseAverages
    from cryptobench.models.test_result import TestResult
    from cryptobench.services.protocols import TextSourceProtocol
    from cryptobench.services.targets import BenchmarkTarget


def _get_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()


def _build_targets(config: Config, use_hybrid: bool) -> tuple[BenchmarkTarget, BenchmarkTarget]:
    from cryptobench.services.targets import build_http_targets

    return build_http_targets(config, use_hybrid=use_hybrid)


def _build_text_source(config: Config) -> TextSourceProtocol:
    from cryptobench.services.text_source import FallbackTextSource, HttpTextSource

    remote = HttpTextSource(
        config.api_base_url,
        timeout=config.api_timeout_seconds,
        max_attempts=config.max_retry_attempts + 1,
    )
    return FallbackTextSource(remote)


def _print_result(result: TestResult) -> None:
    if not result.success:
        click.echo(f"  {result.algorithm}: FAILED ({result.failure_message})")
        return
    click.echo(f"  {result.algorithm} ({result.key_size}-bit):")
    if not result.excluded_key_gen:
        click.echo(f"    Key Generation: {format_time(result.key_gen_time)}")
    click.echo(f"    Encryption:     {format_time(result.encrypt_time)}")
    click.echo(f"    Decryption:     {format_time(result.decrypt_time)}")
    suffix = " (excluding key gen)" if result.excluded_key_gen else ""
    click.echo(f"    Total:          {format_time(result.total_time)}{suffix}")
    if result.excluded_key_gen:
        click.echo(f"    Key Generation: {format_time(result.key_gen_time)} (excluded from total)")


def _print_averages(
    label: str,
    averages: PhaseAverages,
    show_key_gen: bool,
    totals: list[float],
) -> None:
    line = (
        f"  {label}: total {format_time(averages.total)} | "
        f"encrypt {format_time(averages.encrypt)} | decrypt {format_time(averages.decrypt)}"
    )
    if show_key_gen and averages.key_gen is not None:
        line += f" | keygen {format_time(averages.key_gen)}"
    metrics = performance_metrics(totals)
    if metrics is not None:
        formatted = metrics.formatted()
        line += f" | range {formatted['min']}-{formatted['max']}"
    click.echo(line)


def _print_batch_summary(results: BatchResults) -> None:
    stopped = ", stopped early" if results.was_stopped_early else ""
    click.echo(
        f"\n[SUCCESS] Batch complete ({results.successful_tests}/"
        f"{results.requested_tests} successful{stopped})"
    )
    if (
        not results.has_data
        or results.averages_a is None
        or results.averages_b is None
        or results.percentage_differences is None
    ):
        click.echo("  No successful pairs; no statistics available.")
        return

    show_key_gen = not results.excluded_key_gen
    successful = [p for p in results.paired_results if p.both_succeeded]
    _print_averages(
        results.algorithm_a,
        results.averages_a,
        show_key_gen,
        [p.result_a.total_time for p in successful],
    )
    _print_averages(
        results.algorithm_b,
        results.averages_b,
        show_key_gen,
        [p.result_b.total_time for p in successful],
    )

    diffs = results.percentage_differences
    b = results.algorithm_b
    click.echo(f"  Total:      {describe_difference(diffs.total, b)}")
    click.echo(f"  Encryption: {describe_difference(diffs.encrypt, b)}")
    click.echo(f"  Decryption: {describe_difference(diffs.decrypt, b)}")
    if show_key_gen and diffs.key_gen is not None:
        click.echo(f"  Key Gen:    {describe_difference(diffs.key_gen, b)}")
    click.echo(
        f"  Wins: {results.algorithm_a} {results.wins_a} / {b} {results.wins_b} | {results.trend}"
    )
    for insight in performance_insights(results):
        click.echo(f"  [WARNING] {insight}")


def _print_progress(event: BatchProgress) -> None:
    line = f"[{event.completed}/{event.requested}] {event.percent:.0f}%"
    running = event.running_comparison
    if running is not None:
        line += (
            f" | {running.trend} ({running.averages_a.total:.1f}ms vs "
            f"{running.averages_b.total:.1f}ms) | wins "
            f"{running.wins_a}-{running.wins_b}"
        )
    elif event.latest_pair is not None and not event.latest_pair.both_succeeded:
        line += " | pair failed"
    click.echo(line)


@click.command()
@click.option("--text", default=None, type=str, help="Test data (random if omitted)")
@click.option(
    "--data-size",
    default=None,
    type=click.IntRange(MIN_DATA_SIZE, MAX_DATA_SIZE),
    help="Random data length in characters",
)
@click.option("--exclude-keygen", is_flag=True, help="Exclude key generation from total time")
@click.option("--hybrid", is_flag=True, help="Use RSA+AES hybrid instead of direct RSA")
def compare(text: str | None, data_size: int | None, exclude_keygen: bool, hybrid: bool) -> None:
    """Run both algorithms once on the same data."""
    config = _get_config()
    configure_logging(config.log_level)

    from cryptobench.services.comparison_runner import ComparisonRunner
    from cryptobench.services.result_history import ResultHistory

    target_a, target_b = _build_targets(config, hybrid or config.use_rsa_hybrid)
    policy = TimingPolicy(exclude_key_gen=exclude_keygen or config.exclude_key_generation)

    async def _run() -> None:
        payload = text
        if payload is None:
            source = _build_text_source(config)
            payload = await source.generate(
                data_size if data_size is not None else config.default_data_size
            )
        runner = ComparisonRunner(
            history=ResultHistory(config.history_size),
            delay_seconds=config.comparison_delay_seconds,
        )
        click.echo(f"[INFO] Comparing {target_a.algorithm} vs {target_b.algorithm}...")
        session = await runner.run_comparison(target_a, target_b, payload, policy)
        click.echo(f"\n[INFO] Results for {session.data_length} characters:")
        for result in session.results:
            _print_result(result)

    try:
        asyncio.run(_run())
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.command()
@click.option(
    "--count",
    default=None,
    type=click.IntRange(1, MAX_BATCH_SIZE),
    help=f"Number of paired tests (1-{MAX_BATCH_SIZE})",
)
@click.option(
    "--data-size",
    default=None,
    type=click.IntRange(MIN_DATA_SIZE, MAX_DATA_SIZE),
    help="Random data length per test",
)
@click.option("--exclude-keygen", is_flag=True, help="Exclude key generation from total time")
@click.option("--hybrid", is_flag=True, help="Use RSA+AES hybrid instead of direct RSA")
@click.option(
    "--output-format",
    default="summary",
    type=click.Choice(["summary", "json"]),
    help="Output format",
)
def batch(
    count: int | None,
    data_size: int | None,
    exclude_keygen: bool,
    hybrid: bool,
    output_format: str,
) -> None:
    """Run a batch of paired tests with live progress. Ctrl-C stops after the current test."""
    config = _get_config()
    configure_logging(config.log_level)

    from cryptobench.services.batch_orchestrator import BatchOrchestrator

    target_a, target_b = _build_targets(config, hybrid or config.use_rsa_hybrid)
    policy = TimingPolicy(exclude_key_gen=exclude_keygen or config.exclude_key_generation)
    requested = count if count is not None else config.default_batch_size
    size = data_size if data_size is not None else config.default_data_size
    token = CancellationToken()
    orchestrator = BatchOrchestrator.from_config(config, _build_text_source(config))
    progress = _print_progress if output_format == "summary" else None

    async def _run() -> BatchResults:
        loop = asyncio.get_running_loop()
        try:
            loop.add_signal_handler(signal.SIGINT, token.cancel)
            installed = True
        except (NotImplementedError, RuntimeError):
            installed = False
        try:
            return await orchestrator.run_batch(
                requested, size, target_a, target_b, policy, progress, token
            )
        finally:
            if installed:
                loop.remove_signal_handler(signal.SIGINT)

    if output_format == "summary":
        click.echo(
            f"[INFO] Running {requested} tests: {target_a.algorithm} vs "
            f"{target_b.algorithm}, {size} characters each..."
        )
    results = asyncio.run(_run())

    if output_format == "json":
        click.echo(json.dumps(results.model_dump(mode="json"), indent=2))
    else:
        _print_batch_summary(results)


@click.command()
@click.option("--algorithm", default=None, type=click.Choice(["RSA", "ECC", "RSA+AES"]))
@click.option("--key-size", default=None, type=int, help="Key size in bits")
def estimate(algorithm: str | None, key_size: int | None) -> None:
    """Show security estimates for supported key sizes."""
    algorithms = [algorithm] if algorithm else ["RSA", "ECC"]
    for name in algorithms:
        sizes = [key_size] if key_size else known_key_sizes(name)
        for size in sizes:
            result = estimate_security(name, size)
            if result.security_bits is None:
                click.echo(f"  {name}-{size}: no estimate available")
                continue
            click.echo(
                f"  {name}-{size}: {result.security_bits}-bit security | "
                f"{result.estimated_break_time}"
            )


@click.command()
def health() -> None:
    """Check that the crypto backend is reachable."""
    config = _get_config()
    configure_logging(config.log_level)

    from cryptobench.services.http_provider import check_backend_health

    if check_backend_health(config.api_base_url):
        click.echo(f"[SUCCESS] Backend reachable at {config.api_base_url}")
    else:
        click.echo(f"[ERROR] Backend unreachable at {config.api_base_url}")
        raise SystemExit(1)
