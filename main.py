# =============================================================================
# main.py  —  Interactive console for the weather & price-alert MCP server
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/assistant_agent.py), which spawns
#      tools/mcp_server.py as a stdio subprocess
#   2. Sets up an in-memory ADK session
#   3. Reads questions from the console and streams them to the agent
#   4. Prints each MCP tool the agent calls, then its final answer
#
# SESSION IDS:
#   The price-alert tools group alerts by session_id.  Each console run
#   gets a fresh one unless ALERT_SESSION_ID is set, so alerts registered
#   in an earlier run can be listed again.
# =============================================================================

import asyncio
import os
import uuid

from dotenv import load_dotenv

# LiteLlm reads OPENROUTER_API_KEY when the agent is created
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.assistant_agent import create_agent

APP_NAME = "weather_price_assistant"
USER_ID = "console_user"


async def run_agent():
    """Run the assistant interactively until the user quits."""
    alert_session_id = os.environ.get("ALERT_SESSION_ID") or uuid.uuid4().hex

    print("=" * 70)
    print("  WEATHER & PRICE-ALERT ASSISTANT")
    print("  Powered by Google ADK + FastMCP")
    print("=" * 70)
    print(f"\n🔧 Initializing agent (alert session: {alert_session_id})...")
    agent = create_agent(alert_session_id)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask about weather alerts, forecasts, or crypto price alerts.")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
