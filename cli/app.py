from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from app.schemas import AdvisoryRequest, AdvisoryResponse
from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_advisory, render_psychrometrics
from logging_config import configure_logging
from services.advisory import build_household_advisory
from services.station import parse_station_payload


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Ventilation advice from indoor and outdoor air readings.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _load_json(path: Path) -> Dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise typer.BadParameter(f"{path} must contain a JSON object.")
    return payload


def _advise_locally(
    payload: Dict[str, Any], station: bool, threshold: Optional[float]
) -> Dict[str, Any]:
    if station:
        snapshot = parse_station_payload(payload)
        indoor, outdoor = snapshot.indoor, snapshot.outdoor
    else:
        request = AdvisoryRequest.model_validate(payload)
        indoor = [reading.to_domain() for reading in request.indoor]
        outdoor = request.outdoor.to_domain()
        if threshold is None:
            threshold = request.threshold
    advisory = build_household_advisory(indoor, outdoor, threshold)
    return AdvisoryResponse.from_domain(advisory).model_dump(mode="json")


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Advisory API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the API to answer.",
    ),
) -> None:
    """Entry point for the CLI."""
    configure_logging()
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("advise")
def advise_command(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="JSON file with readings."
    ),
    station: bool = typer.Option(
        False,
        "--station/--readings",
        help="Treat the file as a weather-station snapshot instead of a readings list.",
    ),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        help="Absolute humidity gap in g/m³ worth ventilating for.",
    ),
    local: bool = typer.Option(
        False,
        "--local",
        help="Evaluate in this process instead of calling the API.",
    ),
) -> None:
    """Recommend opening or closing the windows for every room in FILE."""
    state = _get_state(ctx)
    payload = _load_json(file)

    if local:
        try:
            result = _advise_locally(payload, station=station, threshold=threshold)
        except ValueError as exc:
            typer.secho(f"Cannot evaluate {file}: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1) from exc
    else:
        typer.echo(f"Requesting advisory from {state.config.base_url} ...")
        result = state.client.request_advisory(payload, station=station, threshold=threshold)

    typer.echo()
    render_advisory(result)


@app.command("humidity")
def humidity_command(
    ctx: typer.Context,
    temperature: float = typer.Argument(..., help="Air temperature in °C."),
    humidity: float = typer.Argument(..., help="Relative humidity in %."),
) -> None:
    """Show absolute humidity and dew point for TEMPERATURE and HUMIDITY."""
    state = _get_state(ctx)
    payload = state.client.get_psychrometrics(temperature, humidity)
    render_psychrometrics(payload)
