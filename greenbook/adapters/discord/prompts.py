"""Bot messages waiting for a reply that sets tags on a fav."""

import threading
from collections import OrderedDict
from typing import Optional


class TagPromptRegistry:
    """Maps prompt message ids to the fav id whose tags the reply will set.

    Bounded: once ``max_prompts`` are pending, the oldest prompt is dropped.
    """

    def __init__(self, max_prompts: int = 200):
        self._max_prompts = max(1, max_prompts)
        self._prompts: "OrderedDict[int, str]" = OrderedDict()
        self._lock = threading.Lock()

    def add(self, prompt_message_id: int, fav_id: str) -> None:
        with self._lock:
            self._prompts[prompt_message_id] = fav_id
            self._prompts.move_to_end(prompt_message_id)
            while len(self._prompts) > self._max_prompts:
                self._prompts.popitem(last=False)

    def peek(self, prompt_message_id: int) -> Optional[str]:
        with self._lock:
            return self._prompts.get(prompt_message_id)

    def pop(self, prompt_message_id: int) -> Optional[str]:
        """Consume a prompt. Returns None if it is not pending."""
        with self._lock:
            return self._prompts.pop(prompt_message_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._prompts)
