"""
Console entry point: talk to the bot from a terminal.

    python main.py

Type messages at the prompt; "exit" or Ctrl-D quits.
"""

import uuid

from conversation_flow import build_flow


def print_reply(reply) -> None:
    for activity in reply.activities:
        print(f"🤖  {activity.text}")


def main():
    flow = build_flow()
    conversation_id = f"console-{uuid.uuid4().hex[:8]}"

    # The first message only wakes the session up
    print_reply(flow.handle_message(conversation_id, "hi"))

    while True:
        try:
            message = input("💬  ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if message.strip().lower() == "exit":
            break
        if not message.strip():
            continue
        print_reply(flow.handle_message(conversation_id, message))


if __name__ == "__main__":
    main()
