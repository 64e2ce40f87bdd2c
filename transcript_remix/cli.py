from concurrent.futures import ThreadPoolExecutor

import click
from flask import current_app
from flask.cli import with_appcontext

from .captions import fetch_transcript
from .errors import TranscriptRemixError
from .formatting import format_transcript
from .prompts import TASKS
from .session import TRANSCRIPT, TaskStatus, Workspace
from .video_id import extract_video_id


def _run_task(services, workspace, task_name, transcript):
    slot = workspace[task_name]
    slot.start()
    try:
        result = services.generation.generate(
            TASKS[task_name], transcript, workspace.instruction_for(task_name)
        )
    except TranscriptRemixError as e:
        slot.fail(e.message)
    else:
        slot.succeed(result)


def run_workspace(services, workspace, url, task_names):
    """Fetch the transcript, then run every requested task side by side."""
    slot = workspace[TRANSCRIPT]
    slot.start()
    try:
        transcript = fetch_transcript(extract_video_id(url), services.caption_provider)
    except TranscriptRemixError as e:
        slot.fail(e.message)
        return workspace
    slot.succeed(transcript)

    if task_names:
        with ThreadPoolExecutor(max_workers=len(task_names)) as pool:
            for name in task_names:
                pool.submit(_run_task, services, workspace, name, transcript)
    return workspace


def _parse_prompt_option(ctx, param, values):
    prompts = {}
    for value in values:
        name, sep, path = value.partition("=")
        if not sep or name not in TASKS:
            raise click.BadParameter(f"expected TASK=PATH with TASK in {', '.join(TASKS)}")
        with open(path, encoding="utf-8") as f:
            prompts[name] = f.read()
    return prompts


@click.command("remix")
@with_appcontext
@click.argument("url")
@click.option("--summary", is_flag=True, help="Summarize the transcript.")
@click.option("--remix", is_flag=True, help="Rewrite the transcript.")
@click.option("--notes", is_flag=True, help="Write research notes.")
@click.option(
    "--prompt",
    "prompts",
    multiple=True,
    callback=_parse_prompt_option,
    metavar="TASK=PATH",
    help="Read the instruction for TASK from PATH.",
)
def remix_command(url, summary, remix, notes, prompts):
    """Fetch the captions for URL and run the selected generation tasks."""
    workspace = Workspace()
    for name, prompt in prompts.items():
        workspace.set_instruction(name, prompt)

    services = current_app.extensions["transcript_remix"]
    selected = {"summary": summary, "remix": remix, "notes": notes}
    task_names = [name for name in TASKS if selected[name]]
    run_workspace(services, workspace, url, task_names)

    transcript_slot = workspace[TRANSCRIPT]
    if transcript_slot.status is TaskStatus.FAILED:
        click.echo(f"Error: {transcript_slot.error}", err=True)
        raise SystemExit(1)

    for paragraph in format_transcript(transcript_slot.result):
        click.echo(paragraph)
        click.echo()

    for name in task_names:
        slot = workspace[name]
        click.secho(f"== {name} ==", bold=True)
        if slot.status is TaskStatus.SUCCEEDED:
            click.echo(slot.result)
        else:
            click.echo(f"Error: {slot.error}", err=True)
        click.echo()


def register(app):
    app.cli.add_command(remix_command)
