"""
Tests for DialogStack frame handling: push, continue, pop-and-resume, replace.
"""

import pytest

from dialogs import (
    DialogSet,
    DialogStack,
    PromptKind,
    StepEntry,
    TurnContext,
    TurnStatus,
    UnknownDialog,
    WaterfallDialog,
)


def ctx(text=None):
    return TurnContext(conversation_id="stack-test", text=text)


@pytest.fixture
def parent_child():
    """
    parent: delegate (begins child, forwards its result) → finish
    child:  ask (text prompt) → done
    """
    seen = []
    holder = {}

    def delegate(step):
        if step.is_child_result:
            seen.append({
                "index": step.frame.step_index,
                "result": step.result,
                "depth": len(holder["stack"]),
            })
            return step.next(step.result)
        return step.begin_dialog("child", {"asked_by": "parent"})

    def finish(step):
        return step.end_dialog({"parent_got": step.result})

    def ask(step):
        return step.prompt("text", "Name?")

    def done(step):
        return step.end_dialog(step.result)

    parent = WaterfallDialog("parent", [delegate, finish])
    child = WaterfallDialog("child", [ask, done], prompts={"text": PromptKind.TEXT})
    stack = DialogStack(DialogSet([parent, child]))
    holder["stack"] = stack
    return stack, seen


class TestPushAndReplace:

    def test_push_unknown_dialog_fails_and_leaves_stack_untouched(self, parent_child):
        stack, _ = parent_child
        with pytest.raises(UnknownDialog):
            stack.push("nope")
        assert stack.is_empty

    def test_push_creates_frame_at_step_zero_on_top(self, parent_child):
        stack, _ = parent_child
        stack.push("parent", {"a": 1})
        frame = stack.push("child", {"b": 2})
        assert stack.top is frame
        assert frame.step_index == 0
        assert frame.options == {"b": 2}
        assert len(stack) == 2

    def test_replace_top_swaps_frame_for_a_fresh_one(self, parent_child):
        stack, _ = parent_child
        old = stack.push("parent")
        old.step_index = 1
        new = stack.replace_top("child", {"fresh": True})
        assert len(stack) == 1
        assert stack.top is new
        assert new.step_index == 0
        assert new.options == {"fresh": True}

    def test_replace_top_with_unknown_dialog_keeps_current_frame(self, parent_child):
        stack, _ = parent_child
        frame = stack.push("parent")
        with pytest.raises(UnknownDialog):
            stack.replace_top("nope")
        assert stack.frames == [frame]

    def test_cancel_all_drops_every_frame(self, parent_child):
        stack, _ = parent_child
        stack.push("parent")
        stack.push("child")
        stack.cancel_all()
        assert stack.is_empty


class TestContinue:

    def test_continue_on_empty_stack_is_empty(self, parent_child):
        stack, _ = parent_child
        assert stack.continue_dialog(ctx("hello")).status == TurnStatus.EMPTY

    def test_begin_cascades_into_child_prompt(self, parent_child):
        stack, _ = parent_child
        result = stack.begin(ctx(), "parent")
        assert result.status == TurnStatus.WAITING
        assert result.step_id == "child.ask"
        assert [f.dialog_id for f in stack.frames] == ["parent", "child"]
        assert stack.frames[0].step_index == 0

    def test_child_result_returns_to_the_step_that_began_it(self, parent_child):
        stack, seen = parent_child
        stack.begin(ctx(), "parent")

        result = stack.continue_dialog(ctx("bob"))
        assert result.status == TurnStatus.COMPLETE
        assert result.payload == {"parent_got": "bob"}
        # popped before the parent was resumed, at the parent's unchanged index
        assert seen == [{"index": 0, "result": "bob", "depth": 1}]
        assert stack.is_empty

    def test_pop_and_resume_delivers_result_to_parent(self, parent_child):
        stack, seen = parent_child
        stack.begin(ctx(), "parent")

        result = stack.pop_and_resume(ctx(), "direct")
        assert result.payload == {"parent_got": "direct"}
        assert seen[0]["result"] == "direct"

    def test_pop_and_resume_on_last_frame_completes(self, parent_child):
        stack, _ = parent_child
        stack.push("child")
        result = stack.pop_and_resume(ctx(), "x")
        assert result.status == TurnStatus.COMPLETE
        assert result.payload == "x"
        assert stack.is_empty

    def test_prompt_answer_is_forwarded_to_the_next_step(self):
        entries = []

        def first(step):
            entries.append(step.entry)
            return step.prompt("text", "Say something")

        def second(step):
            entries.append(step.entry)
            return step.end_dialog(step.result)

        dialog = WaterfallDialog("d", [first, second], prompts={"text": PromptKind.TEXT})
        stack = DialogStack(DialogSet([dialog]))
        stack.begin(ctx(), "d")
        assert stack.top.pending_prompt is not None

        result = stack.continue_dialog(ctx("hi"))
        # the waterfall reads the answer itself; steps only ever see the forwarded value
        assert entries == [StepEntry.INITIAL_ENTRY, StepEntry.INITIAL_ENTRY]
        assert result.payload == "hi"

    def test_running_off_the_end_completes_with_last_value(self):
        dialog = WaterfallDialog("d", [lambda step: step.next(5)])
        stack = DialogStack(DialogSet([dialog]))
        result = stack.begin(ctx(), "d")
        assert result.status == TurnStatus.COMPLETE
        assert result.payload == 5

    def test_replace_outcome_restarts_at_step_zero(self):
        calls = []

        def only(step):
            calls.append(step.options)
            if step.options.get("round") == 2:
                return step.prompt("text", "Round two")
            return step.replace_dialog("loop", {"round": 2})

        dialog = WaterfallDialog("loop", [only], prompts={"text": PromptKind.TEXT})
        stack = DialogStack(DialogSet([dialog]))
        result = stack.begin(ctx(), "loop", {"round": 1})
        assert result.prompt == "Round two"
        assert calls == [{"round": 1}, {"round": 2}]
        assert len(stack) == 1
        assert stack.top.step_index == 0

    def test_begin_child_with_unknown_dialog_raises(self):
        dialog = WaterfallDialog("d", [lambda step: step.begin_dialog("missing")])
        stack = DialogStack(DialogSet([dialog]))
        with pytest.raises(UnknownDialog):
            stack.begin(ctx(), "d")

    def test_prompt_with_unregistered_prompt_id_raises(self):
        dialog = WaterfallDialog("d", [lambda step: step.prompt("nope", "?")])
        stack = DialogStack(DialogSet([dialog]))
        with pytest.raises(UnknownDialog):
            stack.begin(ctx(), "d")

    def test_unsupported_outcome_is_rejected(self):
        dialog = WaterfallDialog("d", [lambda step: "not an outcome"])
        stack = DialogStack(DialogSet([dialog]))
        with pytest.raises(TypeError):
            stack.begin(ctx(), "d")


def test_dialog_set_lookup():
    dialog = WaterfallDialog("d", [lambda step: step.end_dialog()])
    dialogs = DialogSet([dialog])
    assert "d" in dialogs
    assert "other" not in dialogs
    assert dialogs.find("d") is dialog
    with pytest.raises(UnknownDialog):
        dialogs.find("other")
