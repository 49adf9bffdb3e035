"""MCP Server definition using FastMCP.

Exposes 3 tools over the task snapshot in ``settings.tasks_file``:
- sequence_create, sequence_plan, dependency_validate
"""

from dataclasses import asdict
from typing import Any

import structlog
from mcp.server.fastmcp import FastMCP

from sequencer.config import settings
from sequencer.errors import SequencerError
from sequencer.tasks import load_tasks
from sequencer.tools import check_dependencies, create_sequences, format_error, plan_sequence

log = structlog.get_logger()


def create_mcp_server(host: str = "localhost", port: int = 3335) -> FastMCP:
    """Create and configure the MCP server instance.

    Args:
        host: Host to bind to
        port: Port to listen on

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(settings.server_name, host=host, port=port)
    _register_tools(mcp)
    return mcp


def _register_tools(mcp: FastMCP) -> None:
    """Register the sequencing tools on the server instance."""

    @mcp.tool()
    async def sequence_create(
        include_completed: bool = False,
        filter_status: str | None = None,
    ) -> dict[str, Any]:
        """Compute execution sequences from task dependencies.

        Tasks in the same sequence can be worked on in parallel; each sequence
        only depends on earlier ones.

        Args:
            include_completed: Include done/completed/closed tasks
            filter_status: Only sequence tasks whose status contains this text

        Returns:
            Sequences with metadata and a markdown rendering, or an error.
        """
        try:
            response = create_sequences(
                load_tasks(settings.tasks_file),
                include_completed=include_completed,
                filter_status=filter_status,
            )
        except SequencerError as e:
            log.warning("sequence_create_failed", error=e.message)
            return {"error": format_error("Error computing sequences", e)}
        return {**response.to_dict(), "markdown": response.markdown}

    @mcp.tool()
    async def sequence_plan(
        task_ids: list[str] | None = None,
        include_completed: bool = False,
    ) -> dict[str, Any]:
        """Create an execution plan with detailed phase information.

        Only dependencies between the selected tasks are considered. Tasks
        with no dependencies or dependents among them are listed as
        unsequenced; unknown ids are returned in ``not_found``.

        Args:
            task_ids: Task IDs to plan (default: all tasks)
            include_completed: Include done/completed/closed tasks

        Returns:
            Phases, unsequenced tasks, summary and markdown, or an error.
        """
        try:
            response = plan_sequence(
                load_tasks(settings.tasks_file),
                task_ids=task_ids,
                include_completed=include_completed,
            )
        except SequencerError as e:
            log.warning("sequence_plan_failed", error=e.message)
            return {"error": format_error("Error creating sequence plan", e)}
        return {**response.to_dict(), "markdown": response.markdown}

    @mcp.tool()
    async def dependency_validate(
        task_id: str,
        proposed_dependencies: list[str] | None = None,
    ) -> dict[str, Any]:
        """Validate a task's dependencies and report its sequence position.

        Args:
            task_id: Task to validate
            proposed_dependencies: Check these ids instead of the current ones

        Returns:
            Valid and invalid dependencies plus markdown, or an error.
        """
        try:
            result, markdown = check_dependencies(
                load_tasks(settings.tasks_file), task_id, proposed_dependencies
            )
        except SequencerError as e:
            log.warning("dependency_validate_failed", task_id=task_id, error=e.message)
            return {"error": format_error("Failed to validate dependencies", e)}
        return {**asdict(result), "passed": result.passed, "markdown": markdown}


def run_server(host: str, port: int, transport: str = "stdio") -> None:
    """Run the MCP server until interrupted."""
    mcp = create_mcp_server(host=host, port=port)
    log.info("starting_mcp_server", host=host, port=port, transport=transport)
    mcp.run(transport=transport)  # type: ignore[arg-type]
