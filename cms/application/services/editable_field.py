"""Inline editing of one content key.

State machine: VIEWING -> EDITING -> SAVING -> VIEWING. VIEWING is the
only resting state; a failed save returns to VIEWING with the pre-edit
value restored and an error notification.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

from cms.application.dtos.content import SaveOutcome
from cms.application.interfaces.services import ITranslationService
from cms.application.services.editable_context import EditableContext
from cms.core.constants import SUPPORTED_LANGUAGES
from cms.domain.enums import FieldState, LanguageCode
from cms.domain.exceptions import (
    AuthorizationException,
    InvalidStateTransitionException,
)
from cms.domain.fallback import resolve
from cms.domain.value_objects.content import ContentValue, LocalizedValue, as_localized
from cms.shared.telemetry.tracing import add_span_attributes, traced

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """User-visible toast raised by a save.

    level is "success", "warning" or "error"; message_key is a translation
    key for the UI.
    """

    level: str
    message_key: str


NotifyCallback = Callable[[Notification], None]


class EditableFieldController:
    """Controller bound to one content key and one UI language."""

    def __init__(
        self,
        context: EditableContext,
        translator: ITranslationService,
        content_id: str,
        fallback: str,
        lang: str = LanguageCode.ES.value,
        notify: NotifyCallback | None = None,
    ) -> None:
        self._context = context
        self._translator = translator
        self._content_id = content_id
        self._fallback = fallback
        self._lang = LanguageCode(lang)
        self._notify = notify
        self._state = FieldState.VIEWING
        self._buffer: str | None = None

    @property
    def content_id(self) -> str:
        return self._content_id

    @property
    def state(self) -> FieldState:
        return self._state

    @property
    def buffer(self) -> str | None:
        return self._buffer

    @property
    def lang(self) -> str:
        return self._lang.value

    @property
    def display(self) -> str:
        """Resolved text for the current language from the shared cache."""
        return resolve(
            self._lang.value, self._context.cache.get(self._content_id), self._fallback
        )

    def set_language(self, lang: str) -> None:
        if self._state is not FieldState.VIEWING:
            raise InvalidStateTransitionException(self._state.value, "switch language")
        self._lang = LanguageCode(lang)

    async def mount(self) -> str:
        """Load the key through the context and return the display text."""
        await self._context.fetch(self._content_id)
        self._state = FieldState.VIEWING
        return self.display

    def begin_edit(self) -> str:
        """Enter EDITING with the current display text in the buffer."""
        if not self._context.is_admin:
            raise AuthorizationException("edit content")
        if self._state is not FieldState.VIEWING:
            raise InvalidStateTransitionException(self._state.value, "edit")
        self._buffer = self.display
        self._state = FieldState.EDITING
        return self._buffer

    def cancel(self) -> None:
        if self._state is not FieldState.EDITING:
            raise InvalidStateTransitionException(self._state.value, "cancel")
        self._buffer = None
        self._state = FieldState.VIEWING

    @traced("editable_field.save")
    async def save(self, new_text: str) -> SaveOutcome:
        """Save new_text in the current language and translate the sibling.

        Steps: optimistic cache update, best-effort translation, one store
        write of the merged map. A translation failure still writes the
        edited language; a store failure restores the previous cache value.
        Translation and write run as one context-owned task, so they finish
        even if this coroutine is cancelled.
        """
        if self._state is not FieldState.EDITING:
            raise InvalidStateTransitionException(self._state.value, "save")
        self._state = FieldState.SAVING

        content_id = self._content_id
        prior = self._context.cache.get(content_id)
        value = as_localized(prior, SUPPORTED_LANGUAGES).with_text(self._lang.value, new_text)
        self._context.cache.set(content_id, value)

        try:
            task = self._context.track(
                self._persist(new_text, prior, value), f"content-save:{content_id}"
            )
            return await asyncio.shield(task)
        finally:
            self._buffer = None
            self._state = FieldState.VIEWING

    async def _persist(
        self, new_text: str, prior: ContentValue | None, value: LocalizedValue
    ) -> SaveOutcome:
        cache = self._context.cache
        content_id = self._content_id
        lang = self._lang.value
        sibling = self._lang.sibling.value

        translated: str | None = None
        try:
            translated = await self._translator.translate(new_text, lang, sibling)
        except Exception:
            logger.warning(
                "Translation failed for %s (%s->%s), saving single language",
                content_id,
                lang,
                sibling,
                exc_info=True,
            )
        if translated:
            value = value.with_text(sibling, translated)
            cache.set(content_id, value)
        elif prior is None:
            # Nothing was read at mount; merge into the stored map so the
            # untranslated write keeps an existing sibling slot.
            current = await self._context.reload(content_id)
            if current is not None:
                value = as_localized(current, SUPPORTED_LANGUAGES).with_text(lang, new_text)
                cache.set(content_id, value)

        add_span_attributes(translated=bool(translated))
        persisted = True
        try:
            await self._context.store.put(content_id, value)
        except Exception:
            logger.exception("Saving %s failed; restoring previous value", content_id)
            persisted = False
            if prior is not None:
                cache.set(content_id, prior)
            else:
                cache.discard(content_id)

        if not persisted:
            self._emit("error", "contentSaveError")
        elif translated:
            self._emit("success", "contentSaved")
        else:
            self._emit("warning", "contentSavedWithoutTranslation")

        return SaveOutcome(
            content_id=content_id,
            lang=lang,
            value=value,
            display=self.display,
            translated=bool(translated),
            persisted=persisted,
        )

    def _emit(self, level: str, message_key: str) -> None:
        if self._notify is not None:
            self._notify(Notification(level, message_key))
