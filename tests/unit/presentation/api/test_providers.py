"""Tests for presentation/api/providers.py."""

from introspect.domain.model.configuration import QueryConfig
from introspect.domain.model.enums import OverwritePolicy
from introspect.infrastructure.providers.static import StaticProvider
from introspect.presentation.api.providers import ProviderQuery
from tests.factories import make_provider, provider_query

APP = make_provider("app.providers.AppServiceProvider")
PAYMENTS = make_provider("app.providers.PaymentServiceProvider", "payments", "app.PaymentGateway")
MAIL = make_provider("framework.mail.MailServiceProvider", "mailer", "mail.manager")
EVENTS = make_provider("app.providers.EventServiceProvider", deferred=False)
PROVIDERS = (APP, PAYMENTS, MAIL, EVENTS)


class TestProviderQuery:
    """Service provider filters."""

    def test_named(self) -> None:
        assert provider_query(*PROVIDERS).named("app.providers.*").get() == (APP, PAYMENTS, EVENTS)

    def test_deferred(self) -> None:
        assert provider_query(*PROVIDERS).deferred().get() == (PAYMENTS, MAIL)

    def test_eager(self) -> None:
        assert provider_query(*PROVIDERS).eager().get() == (APP, EVENTS)

    def test_deferred_and_eager_combine(self) -> None:
        query = provider_query(*PROVIDERS).deferred().eager()
        assert len(query.filters) == 2
        assert query.get() == ()

    def test_deferred_then_eager_strict(self) -> None:
        config = QueryConfig(on_overwrite=OverwritePolicy.STRICT)
        query = ProviderQuery.create(StaticProvider(PROVIDERS), config)
        assert not query.deferred().eager().exists()

    def test_provides(self) -> None:
        assert provider_query(*PROVIDERS).provides("mailer").get() == (MAIL,)

    def test_provides_unknown_service(self) -> None:
        assert not provider_query(*PROVIDERS).provides("cache").exists()

    def test_is_registered(self) -> None:
        providers = provider_query(*PROVIDERS).deferred()
        assert providers.is_registered("app.providers.AppServiceProvider")
        assert not providers.is_registered("app.providers.Missing")

    def test_deferred_services(self) -> None:
        assert provider_query(*PROVIDERS).deferred_services() == {
            "payments": "app.providers.PaymentServiceProvider",
            "app.PaymentGateway": "app.providers.PaymentServiceProvider",
            "mailer": "framework.mail.MailServiceProvider",
            "mail.manager": "framework.mail.MailServiceProvider",
        }

    def test_provided_services(self) -> None:
        providers = provider_query(*PROVIDERS)
        assert providers.provided_services("app.providers.PaymentServiceProvider") == (
            "payments",
            "app.PaymentGateway",
        )

    def test_provided_services_eager_or_unknown(self) -> None:
        providers = provider_query(*PROVIDERS)
        assert providers.provided_services("app.providers.AppServiceProvider") == ()
        assert providers.provided_services("app.providers.Missing") == ()

    def test_provided_services_ignores_query_filters(self) -> None:
        query = provider_query(*PROVIDERS).eager()
        assert query.provided_services("framework.mail.MailServiceProvider") == (
            "mailer",
            "mail.manager",
        )
