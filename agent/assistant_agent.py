# =============================================================================
# agent/assistant_agent.py  —  Google ADK Demo Agent (drives our MCP server)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates a Google ADK agent wired to tools/mcp_server.py over stdio, so
#   the five tools can be exercised by a real LLM from the console
#   (see main.py).  The server itself does not need this; any MCP client
#   works.
#
# HOW IT WORKS:
#
#   ┌─────────────────────────┐   stdio (MCP)   ┌─────────────────────────┐
#   │  Google ADK Agent       │ ──────────────▶ │  FastMCP server         │
#   │  LLM via LiteLlm        │                 │  (tools/mcp_server.py)  │
#   └─────────────────────────┘                 └─────────────────────────┘
#                                                   │              │
#                                                   ▼              ▼
#                                          api.weather.gov   localhost:3001
#
# MODEL CHOICE:
#   Any LiteLlm model string works.  Default is GPT-4o through OpenRouter
#   (reads OPENROUTER_API_KEY).  Override with AGENT_MODEL, e.g.
#     AGENT_MODEL=openrouter/anthropic/claude-3.5-sonnet
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_assistant_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

# Project root: the server is started as a module from here so that
# `core` and `tools` import cleanly in the subprocess.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def server_parameters() -> StdioServerParameters:
    """How ADK should spawn the MCP server subprocess.

    The current interpreter is reused, so the subprocess sees the same
    virtual environment (fastmcp, httpx, ...) as the agent.
    """
    return StdioServerParameters(
        command=sys.executable,
        args=["-m", "tools.mcp_server"],
        cwd=PROJECT_ROOT,
    )


def create_agent(session_id: str) -> Agent:
    """Create the demo assistant agent for one conversation.

    Args:
        session_id: Passed into the system prompt so the price-alert tools
                    are always called with the same session.

    Returns:
        A configured Google ADK Agent instance.
    """
    mcp_tools = MCPToolset(connection_params=server_parameters())

    return Agent(
        name="weather_price_assistant",
        model=LiteLlm(model=os.environ.get("AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_assistant_prompt(session_id),
        tools=[mcp_tools],
    )
