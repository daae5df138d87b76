import logging

from django.db import DatabaseError
from django.db.models.signals import post_delete, post_save

from audit.enums import Verb
from audit.services import log_activity

from .exceptions import error_message

logger = logging.getLogger(__name__)


class EntityContainer:
    """
    In-memory mirror of one entity collection for the current session.

    Holds ``items`` (most recent first), ``is_loading`` and ``error`` and exposes
    create/update/remove operations that go through the app's data-access
    functions and record an activity-log entry on success.

    Sync model: ``open()`` loads the collection and subscribes to the model's
    post_save/post_delete signals. Every snapshot pushed by the store replaces
    the local copy of that row, so local mutations are only an optimistic
    overlay until the next snapshot arrives. Listeners registered with
    ``subscribe()`` are called after every change of ``items``.

    Subclasses set ``model`` and ``entity_type`` and implement the four
    data-access hooks plus the ``describe_*`` messages.
    """

    model = None
    entity_type = ""

    def __init__(self, actor=None):
        self.actor = actor
        self.items = []
        self.is_loading = False
        self.error = None
        self.loaded = False
        self._filters = {}
        self._listeners = []
        self._connected = False

    # ------------------------------------------------------------------
    # data-access hooks
    # ------------------------------------------------------------------
    def load(self, **filters):
        raise NotImplementedError

    def create_entity(self, data):
        raise NotImplementedError

    def update_entity(self, pk, data):
        raise NotImplementedError

    def delete_entity(self, pk):
        raise NotImplementedError

    # (action, icon) for the activity log; None skips logging
    def describe_created(self, entity):
        return None

    def describe_updated(self, entity, data):
        return None

    def describe_removed(self, pk, entity):
        return None

    def link_for(self, pk) -> str:
        return ""

    # ------------------------------------------------------------------
    # listeners
    # ------------------------------------------------------------------
    def subscribe(self, callback):
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    # ------------------------------------------------------------------
    # reads
    # ------------------------------------------------------------------
    def get(self, pk):
        for item in self.items:
            if str(item.pk) == str(pk):
                return item
        return None

    def fetch_all(self, **filters):
        self.is_loading = True
        self._filters = filters
        try:
            self.items = list(self.load(**filters))
            self.error = None
            self.loaded = True
        except Exception as exc:
            self.error = error_message(exc)
            raise
        finally:
            self.is_loading = False
        self._notify()
        return self.items

    # ------------------------------------------------------------------
    # mutations
    # ------------------------------------------------------------------
    def create(self, data):
        entity = self._run(self.create_entity, data)
        self._upsert(entity)
        self._log(self.describe_created(entity), entity.pk, Verb.CREATE)
        return entity

    def update(self, pk, data):
        entity = self._run(self.update_entity, pk, data)
        self._upsert(entity)
        self._log(self.describe_updated(entity, data), entity.pk, Verb.UPDATE)
        return entity

    def remove(self, pk):
        entity = self.get(pk)
        self._run(self.delete_entity, pk)
        self._drop(pk)
        self._log(self.describe_removed(pk, entity), pk, Verb.DELETE)

    def act(self, func, pk, describe):
        """Run a domain action returning the changed entity, then log it."""
        entity = self._run(func, pk)
        self._upsert(entity)
        self._log(describe(entity), entity.pk, Verb.ACTION)
        return entity

    def _run(self, func, *args):
        try:
            result = func(*args)
        except Exception as exc:
            self.error = error_message(exc)
            self._reconcile()
            raise
        self.error = None
        return result

    def _reconcile(self):
        """Reload after a failed mutation so local state matches the store."""
        if not self.loaded:
            return
        try:
            self.items = list(self.load(**self._filters))
        except DatabaseError:
            logger.warning("Could not reload %s after a failed mutation", self.entity_type, exc_info=True)
            return
        self._notify()

    def _upsert(self, entity):
        for index, item in enumerate(self.items):
            if item.pk == entity.pk:
                self.items[index] = entity
                break
        else:
            self.items.insert(0, entity)
        self._notify()

    def _drop(self, pk):
        before = len(self.items)
        self.items = [item for item in self.items if str(item.pk) != str(pk)]
        if len(self.items) != before:
            self._notify()

    def _log(self, description, pk, verb):
        if not description:
            return
        action, icon = description
        log_activity(
            actor=self.actor,
            action=action,
            verb=verb,
            target_type=self.entity_type,
            target_id=pk,
            icon=icon,
            link=self.link_for(pk),
        )

    # ------------------------------------------------------------------
    # live sync
    # ------------------------------------------------------------------
    @property
    def _dispatch_uid(self):
        return f"{self.__class__.__name__}-{id(self)}"

    def open(self, **filters):
        self.fetch_all(**filters)
        if not self._connected:
            post_save.connect(self._on_saved, sender=self.model, weak=False, dispatch_uid=self._dispatch_uid)
            post_delete.connect(self._on_deleted, sender=self.model, weak=False, dispatch_uid=self._dispatch_uid)
            self._connected = True
        return self

    def close(self):
        if self._connected:
            post_save.disconnect(sender=self.model, dispatch_uid=self._dispatch_uid)
            post_delete.disconnect(sender=self.model, dispatch_uid=self._dispatch_uid)
            self._connected = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def matches(self, instance) -> bool:
        return all(str(getattr(instance, key, None)) == str(value) for key, value in self._filters.items())

    def _on_saved(self, sender, instance, raw=False, **kwargs):
        if raw:
            return
        if self.matches(instance):
            self._upsert(instance)
        else:
            self._drop(instance.pk)

    def _on_deleted(self, sender, instance, **kwargs):
        self._drop(instance.pk)
