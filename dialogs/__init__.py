"""Dialogs package - the dialog engine and the bot's dialogs."""

from .errors import DialogError, UnknownDialog, MalformedPromptAnswer, MissingRequiredConfig
from .turn import (
    Activity,
    InputHint,
    StepEntry,
    StepInvocation,
    TurnContext,
    TurnResult,
    TurnStatus,
)
from .prompts import PromptKind, PromptSpec
from .steps import BeginChild, Complete, Next, Prompt, ReplaceWith, WaterfallStepContext
from .dialog import Dialog, DialogSet, WaterfallDialog
from .interceptor import CancelInterceptor, Interruption
from .stack import DialogFrame, DialogStack
from .order_dialog import OrderDialog, ORDER_DIALOG
from .order_session import OrderSession, ORDER_SESSION

__all__ = [
    "DialogError",
    "UnknownDialog",
    "MalformedPromptAnswer",
    "MissingRequiredConfig",
    "Activity",
    "InputHint",
    "StepEntry",
    "StepInvocation",
    "TurnContext",
    "TurnResult",
    "TurnStatus",
    "PromptKind",
    "PromptSpec",
    "BeginChild",
    "Complete",
    "Next",
    "Prompt",
    "ReplaceWith",
    "WaterfallStepContext",
    "Dialog",
    "DialogSet",
    "WaterfallDialog",
    "CancelInterceptor",
    "Interruption",
    "DialogFrame",
    "DialogStack",
    "OrderDialog",
    "ORDER_DIALOG",
    "OrderSession",
    "ORDER_SESSION",
]
