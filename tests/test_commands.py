# tests/test_commands.py

from __future__ import annotations

from tasklist.cli.commands import CommandRegistry, registry


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, args):
        called["a"] += 1
        return f"got {args}"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x 'y z'") == "got ['x', 'y z']"
    assert reg.handle(state, "/ALPHA") == "got []"
    assert called["a"] == 2
    assert "/a - a" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")
    assert "Could not parse" in (reg.handle(state, "/a 'unterminated") or "")


def test_add_get_list_flow(state) -> None:
    assert registry.handle(state, "/add Buy milk") == "Added task #1."
    assert registry.handle(state, "/add -p high Pay rent") == "Added task #2."

    assert registry.handle(state, "/get 2") == "#2 [ ] (high) Pay rent"
    assert registry.handle(state, "/list") == "#1 [ ] (medium) Buy milk\n#2 [ ] (high) Pay rent"
    assert registry.handle(state, "/list 2 1") == "#2 [ ] (high) Pay rent"
    assert registry.handle(state, "/list 5") == "No tasks on this page."


def test_mutating_commands(state) -> None:
    registry.handle(state, "/add write report")

    assert registry.handle(state, "/toggle 1") == "#1 [x] (medium) write report"
    assert registry.handle(state, "/undone 1") == "Task #1 marked incomplete."
    assert registry.handle(state, "/done 1") == "Task #1 marked complete."
    assert registry.handle(state, "/priority 1 LOW") == "Task #1 priority set to low."
    registry.handle(state, "/tag 1 work")
    registry.handle(state, "/tag 1 work")
    assert registry.handle(state, "/get 1") == "#1 [x] (low) write report [tags: work, work]"
    registry.handle(state, "/untag 1 work")
    registry.handle(state, '/update 1 "write the report"')
    assert registry.handle(state, "/get 1") == "#1 [x] (low) write the report"

    assert registry.handle(state, "/delete 1") == "Deleted task #1."
    assert registry.handle(state, "/delete 1") == "Deleted task #1."


def test_errors_are_rendered(state) -> None:
    assert registry.handle(state, "/get 7") == "Error: Item not found"
    registry.handle(state, "/add x")
    assert registry.handle(state, "/update 1") == "Error: Invalid input: Text cannot be empty"
    assert (registry.handle(state, "/priority 1 soon") or "").startswith("Error: Invalid input")


def test_usage_errors(state) -> None:
    assert registry.handle(state, "/get") == "Usage: /get <id>"
    assert "must be a number" in (registry.handle(state, "/get abc") or "")
    assert "out of range" in (registry.handle(state, "/get -1") or "")
    assert "out of range" in (registry.handle(state, "/get 99999999999") or "")
    assert "must be a number" in (registry.handle(state, "/list one") or "")
    assert registry.handle(state, "/add") == "Usage: /add [-p low|medium|high] <text>"


def test_whoami_switches_partition(state) -> None:
    assert registry.handle(state, "/whoami") == "You are u1."
    registry.handle(state, "/add mine")

    assert registry.handle(state, "/whoami u2") == "Now acting as u2."
    assert registry.handle(state, "/list") == "No tasks on this page."
    assert registry.handle(state, "/get 1") == "Error: Item not found"
    assert registry.handle(state, '/whoami ""') == "Usage: /whoami [name]"

    status = registry.handle(state, "/status") or ""
    assert "Owner: u2" in status
    assert "Your tasks: 0" in status
    assert "Last issued id: 1" in status


def test_whoami_rejects_unusable_owner(state) -> None:
    reply = registry.handle(state, "/whoami " + "x" * 70000) or ""
    assert reply.startswith("Owner name is too long")
    assert reply.endswith("Usage: /whoami [name]")
    assert registry.handle(state, "/whoami") == "You are u1."

    registry.handle(state, "/add still works")
    assert registry.handle(state, "/list") == "#1 [ ] (medium) still works"


def test_priority_reply_uses_stored_value(state) -> None:
    registry.handle(state, "/add p")
    assert registry.handle(state, "/priority 1 High") == "Task #1 priority set to high."
    assert registry.handle(state, "/get 1") == "#1 [ ] (high) p"
