"""
Explicit state for an interactive session: one slot per operation.

Slots never share state. ``Workspace.reset`` clears the slots and the
instruction overrides but does not stop work already in flight, so a late
result can still land in a freshly cleared slot.
"""

import enum

from .prompts import TASKS

TRANSCRIPT = "transcript"


class TaskStatus(enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TaskSlot:
    def __init__(self, name):
        self.name = name
        self.clear()

    def clear(self):
        self.status = TaskStatus.IDLE
        self.result = None
        self.error = None

    def start(self):
        self.status = TaskStatus.PENDING
        self.result = None
        self.error = None

    def succeed(self, result):
        self.status = TaskStatus.SUCCEEDED
        self.result = result
        self.error = None

    def fail(self, error):
        self.status = TaskStatus.FAILED
        self.result = None
        self.error = error

    @property
    def is_pending(self):
        return self.status is TaskStatus.PENDING

    def __repr__(self):
        return f"TaskSlot({self.name!r}, {self.status.value})"


class Workspace:
    def __init__(self):
        self.slots = {name: TaskSlot(name) for name in (TRANSCRIPT, *TASKS)}
        self.instructions = {}

    def __getitem__(self, name):
        return self.slots[name]

    def instruction_for(self, task_name):
        return self.instructions.get(task_name) or TASKS[task_name].default_prompt

    def set_instruction(self, task_name, instruction):
        if task_name not in TASKS:
            raise KeyError(task_name)
        self.instructions[task_name] = instruction

    def is_instruction_modified(self, task_name):
        return self.instruction_for(task_name) != TASKS[task_name].default_prompt

    def reset(self):
        for slot in self.slots.values():
            slot.clear()
        self.instructions.clear()
