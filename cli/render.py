from __future__ import annotations

from typing import Any, Dict, Iterable

import typer

_ACTION_COLORS = {
    "OPEN": typer.colors.GREEN,
    "CLOSE": typer.colors.RED,
    "WAIT": typer.colors.YELLOW,
}


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def _measurement_pairs(reading: Dict[str, Any]) -> list[tuple[str, Any]]:
    pairs: list[tuple[str, Any]] = [
        ("temperature", f"{reading.get('temperature')} °C"),
        ("humidity", f"{reading.get('humidity')} %"),
    ]
    # Unmeasured values are omitted rather than shown as zero.
    for key, unit in (("co2", "ppm"), ("pressure", "hPa"), ("noise", "dB")):
        value = reading.get(key)
        if value is not None:
            pairs.append((key, f"{value} {unit}"))
    return pairs


def render_verdict(verdict: Dict[str, Any]) -> None:
    action = verdict.get("action", "")
    typer.secho(
        f"{action} the windows ({verdict.get('priority')} priority)",
        fg=_ACTION_COLORS.get(action),
        bold=True,
    )
    typer.echo(verdict.get("reason", ""))
    if verdict.get("warning"):
        typer.secho(f"Warning: {verdict['warning']}", fg=typer.colors.YELLOW)


def render_advisory(payload: Dict[str, Any]) -> None:
    echo_heading("Ventilation Advisory")
    render_verdict(payload.get("verdict") or {})

    assessment = payload.get("assessment") or {}
    typer.echo()
    echo_heading("Air Quality")
    echo_key_values(
        [
            ("critical_room", payload.get("critical_room")),
            ("quality", assessment.get("quality")),
            ("score", assessment.get("score")),
        ]
    )
    issues = assessment.get("issues") or []
    if issues:
        typer.echo("issues:")
        for issue in issues:
            typer.echo(f"  - {issue}")

    outdoor = payload.get("outdoor") or {}
    typer.echo()
    echo_heading(f"Outdoor ({outdoor.get('name') or 'Outdoor'})")
    echo_key_values(_measurement_pairs(outdoor))
    typer.echo(f"absolute_humidity: {payload.get('outdoor_absolute_humidity')} g/m³")

    for room in payload.get("rooms") or []:
        reading = room.get("reading") or {}
        verdict = room.get("verdict") or {}
        details = verdict.get("details") or {}
        marker = " [critical]" if room.get("critical") else ""
        typer.echo()
        echo_heading(f"{verdict.get('room_name')}{marker}")
        echo_key_values(_measurement_pairs(reading))
        echo_key_values(
            [
                ("absolute_humidity", f"{room.get('absolute_humidity')} g/m³"),
                ("humidity_difference", f"{details.get('humidity_difference')} g/m³"),
                ("dew_point", f"{details.get('dew_point_indoor')} °C"),
                ("advice", f"{verdict.get('action')} - {verdict.get('reason')}"),
            ]
        )


def render_psychrometrics(payload: Dict[str, Any]) -> None:
    echo_heading("Psychrometrics")
    echo_key_values(
        [
            ("temperature", f"{payload.get('temperature')} °C"),
            ("humidity", f"{payload.get('humidity')} %"),
            ("saturated_vapor_pressure", f"{payload.get('saturated_vapor_pressure')} hPa"),
            ("absolute_humidity", f"{payload.get('absolute_humidity')} g/m³"),
            ("dew_point", f"{payload.get('dew_point')} °C"),
        ]
    )
