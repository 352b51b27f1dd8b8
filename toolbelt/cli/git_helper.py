"""CLI command for the git helper.

Usage: git-helper [commit|pr|review|rewrite] [TARGET_BRANCH]
"""

from enum import Enum
from typing import Optional

import typer

from toolbelt.cli.utils import (
    copy_to_clipboard,
    display_debug_info,
    display_result,
    report_error,
    select_option,
)
from toolbelt.config import HelperConfig, load_config
from toolbelt.git import (
    EmptyContextError,
    GitError,
    commit_with_message,
    get_current_branch,
    get_head_commit,
    get_repo_root,
    list_commits,
    resolve_commit,
    target_branch_choices,
)
from toolbelt.global_config import GlobalConfigError
from toolbelt.llm import LLMError
from toolbelt.modes import (
    MODE_SPECS,
    REVIEW_SOURCE_LABELS,
    ContextRequest,
    OperatingMode,
    ReviewSource,
    get_mode_spec,
    parse_mode,
)
from toolbelt.pipeline import GenerationResult, generate

REWRITE_NOTICE = """
!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
Only the most recent commit can be rewritten from here.
Please use an interactive rebase or another tool to rewrite this commit.

The commit message has been copied to your clipboard.
!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
"""


class NextAction(Enum):
    """Follow-up actions offered after a message is generated."""

    SUBMIT = "Submit commit with this message"
    EDIT = "Edit message before committing"
    REGENERATE = "Regenerate"
    DEBUG = "Show debug info"
    EXIT = "Exit"


def git_helper_command(
    mode: Optional[str] = typer.Argument(
        None,
        help="Operation type: commit, pr, review or rewrite (prompted if omitted)",
    ),
    target_branch: Optional[str] = typer.Argument(
        None,
        help="Target branch for pull requests and branch reviews (prompted if omitted)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Override the configured model",
    ),
) -> None:
    """Generate commit messages, PR descriptions and code reviews from git changes."""
    try:
        operating_mode = parse_mode(mode) if mode else prompt_for_mode()
        if operating_mode is None:
            typer.echo("\nExiting application...", err=True)
            raise typer.Exit(0)

        get_repo_root()
        config = load_config(model=model)
        typer.echo(f"Using model: {config.model}", err=True)

        request = resolve_request(operating_mode, target_branch)
        exit_code = run_session(config, request)

    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except (GitError, LLMError, GlobalConfigError) as e:
        report_error(e)
        raise typer.Exit(1)
    except (KeyboardInterrupt, typer.Abort):
        typer.echo("\nExiting application...", err=True)
        raise typer.Exit(1)

    raise typer.Exit(exit_code)


def prompt_for_mode() -> Optional[OperatingMode]:
    """Ask which operation to run.

    Returns:
        The chosen mode, or None if the user chose to exit.
    """
    specs = list(MODE_SPECS.values())
    options = [spec.label for spec in specs] + ["Exit"]
    index = select_option("What would you like to do?", options)
    if index == len(specs):
        return None
    typer.echo(f"\nStarting the {specs[index].noun} generator...", err=True)
    return specs[index].mode


def prompt_for_target_branch(current_branch: str) -> str:
    """Ask for the branch the changes will be merged into."""
    choices = target_branch_choices(current_branch)
    if not choices:
        raise GitError(f"No branches other than {current_branch} found.")
    return choices[select_option("Select the target branch:", choices)]


def prompt_for_commit(title: str) -> str:
    """Ask for a commit and return its short hash."""
    commits = list_commits()
    if not commits:
        raise EmptyContextError("No commits found. Please make some commits before running this script.")
    return commits[select_option(title, commits)].split()[0]


def resolve_request(mode: OperatingMode, target_branch: Optional[str] = None) -> ContextRequest:
    """Resolve every interactive choice the mode needs.

    Args:
        mode: The chosen operating mode.
        target_branch: Target branch from the command line, if any.

    Returns:
        A ContextRequest the pipeline can run (and re-run) without prompting.
    """
    if mode == OperatingMode.COMMIT:
        return ContextRequest(mode=mode)

    elif mode == OperatingMode.PULL_REQUEST:
        target = target_branch or prompt_for_target_branch(get_current_branch())
        return ContextRequest(mode=mode, target_branch=target)

    elif mode == OperatingMode.REWRITE:
        commit = prompt_for_commit("Select a commit to rewrite:")
        return ContextRequest(mode=mode, commit=commit)

    elif mode == OperatingMode.REVIEW:
        sources = list(REVIEW_SOURCE_LABELS)
        labels = [REVIEW_SOURCE_LABELS[source] for source in sources]
        source = sources[select_option("What would you like to review?", labels)]

        if source == ReviewSource.BRANCHES:
            target = target_branch or prompt_for_target_branch(get_current_branch())
            return ContextRequest(mode=mode, review_source=source, target_branch=target)
        if source == ReviewSource.COMMIT:
            commit = prompt_for_commit("Select a commit to review:")
            return ContextRequest(mode=mode, review_source=source, commit=commit)
        return ContextRequest(mode=mode, review_source=source)

    else:
        raise ValueError(f"Unsupported mode: {mode}")


def available_actions(mode: OperatingMode) -> list[NextAction]:
    """Actions offered in the menu for a mode."""
    actions = []
    if get_mode_spec(mode).commit_actions:
        actions.extend([NextAction.SUBMIT, NextAction.EDIT])
    actions.extend([NextAction.REGENERATE, NextAction.DEBUG, NextAction.EXIT])
    return actions


def prompt_for_next_action(mode: OperatingMode) -> NextAction:
    """Show the action menu and return the chosen action."""
    actions = available_actions(mode)
    index = select_option("\nWhat would you like to do?", [action.value for action in actions])
    return actions[index]


def run_session(config: HelperConfig, request: ContextRequest) -> int:
    """Generate, present and act until the user submits or exits.

    Returns:
        The process exit status.
    """
    while True:
        result = generate(config, request)
        display_result(result, copy_to_clipboard(result.message))

        action = prompt_for_next_action(request.mode)
        while action == NextAction.DEBUG:
            display_debug_info(config, result)
            action = prompt_for_next_action(request.mode)

        if action == NextAction.REGENERATE:
            continue
        if action == NextAction.EXIT:
            typer.echo("\nExiting application...", err=True)
            return 0
        return submit(request, result, edit=action == NextAction.EDIT)


def submit(request: ContextRequest, result: GenerationResult, edit: bool) -> int:
    """Commit (or amend HEAD) with the generated message.

    Returns:
        The git exit status, or 0 when nothing could be done.
    """
    amend = request.mode == OperatingMode.REWRITE
    if amend and resolve_commit(request.commit) != get_head_commit():
        typer.echo(REWRITE_NOTICE, err=True)
        return 0

    typer.echo("\nCommitting...", err=True)
    returncode = commit_with_message(result.message, edit=edit, amend=amend)
    if returncode != 0:
        typer.echo("Commit failed!", err=True)
    return returncode
