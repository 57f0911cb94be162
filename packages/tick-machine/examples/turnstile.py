"""Turnstile -- driving a StateMachine with events, undo, and redo.

Demonstrates:
- Building a machine from a plain dict config
- Triggering events and handling a rejected one
- Walking history back and forth with undo/redo
- Observing moves through the on_transition hook

Run: python packages/tick-machine/examples/turnstile.py
"""

from tick_machine import InvalidTransitionError, StateMachine, configure_logging

CONFIG = {
    "initial": "locked",
    "states": {
        "locked": {"transitions": {"coin": "unlocked", "kick": "broken"}},
        "unlocked": {"transitions": {"push": "locked", "coin": "unlocked"}},
        "broken": {"transitions": {"repair": "locked"}},
    },
}


def on_transition(machine: StateMachine, old: str, new: str) -> None:
    print(f"  {old:>9} -> {new:<9} (undo depth {len(machine.history)})")


def main() -> None:
    configure_logging(level="WARNING")
    print("=== Turnstile ===\n")

    fsm = StateMachine(CONFIG, strict=True, on_transition=on_transition)
    print(f"Start: {fsm.get_state()}")
    print(f"States accepting 'coin': {fsm.get_states('coin')}\n")

    for event in ["coin", "push", "push", "kick", "repair"]:
        try:
            fsm.trigger(event)
        except InvalidTransitionError as exc:
            print(f"  '{exc.event}' ignored in state '{exc.state}'")

    print("\nUndo twice:")
    fsm.undo()
    fsm.undo()

    print("\nRedo once:")
    fsm.redo()

    print(f"\nDone. State={fsm.get_state()} history={list(fsm.history)} future={list(fsm.future)}")


if __name__ == "__main__":
    main()
