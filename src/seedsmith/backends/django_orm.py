"""Django backend - ``abulk_create`` on the model's default manager."""

from typing import Any

from seedsmith.backends.base import Backend, BackendKind


class DjangoBackend(Backend):
    """
    Insert records through the Django ORM.

    The client is anything exposing ``get_model(name)``: an ``AppConfig``
    (``apps.get_app_config("shop")``) resolves bare model names, the global
    ``django.apps.apps`` registry resolves ``"app_label.Model"``. Records are
    turned into model instances and passed to ``objects.abulk_create`` so the
    call is safe from an event loop.
    """

    kind = BackendKind.DJANGO

    async def insert_many(self, model: str, records: list[dict[str, Any]]) -> None:
        if not records:
            return

        model_class = self.client.get_model(model)
        instances = [model_class(**record) for record in records]
        await model_class.objects.abulk_create(instances)
