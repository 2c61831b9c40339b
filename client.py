import os, json, sys, requests, openai, readline
from dotenv import load_dotenv
from clockify_tools import catalogue

# Load environment variables from .env file
load_dotenv()

MCP_URL = os.getenv("CLOCKIFY_MCP_URL", "http://localhost:8000")
MODEL   = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

SYSTEM_PROMPT = (
    "You are an assistant that manages Clockify time tracking through tools. "
    "Look up workspace, project and user IDs with the listing tools before using them. "
    "Always send dates and times in ISO 8601 format."
)

WRITE_PREFIXES = ("create_", "update_", "delete_", "stop_")


def openai_tools(tools: list[dict]) -> list[dict]:
    """Convert MCP tool descriptors to OpenAI function-calling tools."""
    return [
        {
            "type": "function",
            "function": {
                "name": tool["name"],
                "description": tool["description"],
                "parameters": tool["inputSchema"],
            },
        }
        for tool in tools
    ]


def needs_confirmation(name: str) -> bool:
    return name.startswith(WRITE_PREFIXES)


def call_tool(name: str, args: dict) -> str:
    try:
        r = requests.post(f"{MCP_URL}/tools/{name}", json=args, timeout=60)
    except requests.RequestException as e:
        return f"Error: could not reach the MCP server: {e}"
    if not r.ok:
        try:
            error = r.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            error = r.text
        return f"Error: {error}"
    return "\n".join(item["text"] for item in r.json()["content"])


def confirm(name: str, args: dict) -> bool:
    print("\n" + "="*60)
    print(f"📋 CONFIRM {name.upper()}")
    print("="*60)
    for key, value in args.items():
        print(f"• {key}: {value}")
    print("="*60)
    answer = input("Proceed? (yes/no): ").strip().lower()
    return answer in ['yes', 'y', 'confirm', 'ok', 'proceed', 'sure', 'go ahead']


def chat(messages: list, user_input: str, client=None, tools=None):
    client = client or openai.OpenAI()
    tools = tools or openai_tools(catalogue)
    messages.append({"role": "user", "content": user_input})

    while True:
        resp = client.chat.completions.create(
            model=MODEL,
            messages=messages,
            tools=tools,
            tool_choice="auto"
        )
        msg = resp.choices[0].message
        messages.append(msg)

        if not msg.tool_calls:
            print(msg.content)
            return msg.content

        for tool_call in msg.tool_calls:
            name = tool_call.function.name
            args = json.loads(tool_call.function.arguments or "{}")
            print(f"↳ Model called {name} with {args}")

            if needs_confirmation(name) and not confirm(name, args):
                print("❌ Cancelled.")
                result = "The user cancelled this operation."
            else:
                result = call_tool(name, args)
                print(result)

            messages.append({"role": "tool",
                             "tool_call_id": tool_call.id,
                             "content": result})


if __name__ == "__main__":
    # Check for OpenAI API key
    if not os.getenv("OPENAI_API_KEY"):
        print("❌ OpenAI API key not found!")
        print("Please set your OpenAI API key in your .env file:")
        print("OPENAI_API_KEY=your-api-key-here")
        sys.exit(1)

    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    try:
        while True:
            chat(messages, input("You: "))
    except (EOFError, KeyboardInterrupt):
        sys.exit()
