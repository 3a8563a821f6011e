"""
Tests for the structural pattern examples.
"""

import pytest

from app.config import settings
from app.exceptions import NotFoundError, ServiceValidationError
from patterns.structural.adapter import (
    conceptual as adapter_conceptual,
    currency_converter,
    paypal_payment,
)
from patterns.structural.bridge import device_controller, drawing_tool, payment_system
from patterns.structural.composite import conceptual as composite_conceptual, file_system
from patterns.structural.decorator import (
    conceptual as decorator_conceptual,
    message_transformation,
    text_filtering,
)
from patterns.structural.facade import meal_order, smart_home
from patterns.structural.flyweight import (
    cat_features,
    conceptual as flyweight_conceptual,
    forest_simulation,
)
from patterns.structural.proxy import conceptual as proxy_conceptual, image_proxy


# =============================================================================
# ADAPTER
# =============================================================================


def test_adapter_translates_adaptee():
    adapter = adapter_conceptual.Adapter(adapter_conceptual.Adaptee())

    assert adapter.request() == "Adapter: (TRANSLATED) Special behavior of the Adaptee."


def test_currency_adapter_converts_usd_to_eur(capsys):
    adapter = currency_converter.ExchangeRateAPIAdapter(currency_converter.ExchangeRateAPI())

    assert adapter.convert(100, "USD", "EUR") == pytest.approx(85.0)
    assert adapter.convert(100, "EUR", "USD") == pytest.approx(118.0)


def test_currency_adapter_unknown_pair():
    adapter = currency_converter.ExchangeRateAPIAdapter(currency_converter.ExchangeRateAPI())

    with pytest.raises(ServiceValidationError):
        adapter.convert(100, "USD", "JPY")


def test_currency_converter_main(capsys):
    currency_converter.main()

    assert capsys.readouterr().out.count("Converted amount: 85.00 EUR") == 2


def test_paypal_adapter_logs_in_once(capsys):
    paypal = paypal_payment.PayPalPayment("user@example.com", "secret")
    adapter = paypal_payment.PayPalPaymentAdapter(paypal)

    adapter.pay(100)
    adapter.pay(50)

    out = capsys.readouterr().out
    assert out.count("Logged in to PayPal") == 1
    assert "PayPal processing payment of $100." in out
    assert "PayPal processing payment of $50." in out


# =============================================================================
# BRIDGE
# =============================================================================


def test_drawing_tool_resize_doubles_dimensions():
    circle = drawing_tool.Circle(drawing_tool.VectorRenderer(), 5)
    circle.resize(2)

    assert circle.draw() == "VectorRenderer: Drawing a circle with radius 10."


def test_device_controllers(capsys):
    tv = device_controller.Television()
    advanced = device_controller.AdvancedDeviceController(tv)
    device_controller.client_code(advanced)

    radio = device_controller.Radio()
    device_controller.client_code(device_controller.DeviceController(radio))

    assert (tv.power, tv.volume, tv.channel) == (True, 15, 7)
    assert (radio.power, radio.volume, radio.frequency) == (True, 15, 101.5)


def test_payment_bridge_formats_amount():
    result = payment_system.OnlinePayment(payment_system.PayPalGateway()).pay(100.00)

    assert result.startswith("OnlinePayment: Initiating online payment...")
    assert "$100.00" in result


# =============================================================================
# COMPOSITE
# =============================================================================


def test_composite_tree_operation():
    tree = composite_conceptual.Composite()
    branch = composite_conceptual.Composite()
    branch.add(composite_conceptual.Leaf())
    branch.add(composite_conceptual.Leaf())
    tree.add(branch)

    assert tree.operation() == "Branch(Branch(Leaf+Leaf))"
    assert branch.parent is tree


def test_client_code2_adds_to_composites_only(capsys):
    tree = composite_conceptual.Composite()
    composite_conceptual.client_code2(tree, composite_conceptual.Leaf())

    assert capsys.readouterr().out.strip() == "RESULT: Branch(Leaf)"


def test_file_system_sizes_are_recursive():
    root = file_system.create_filesystem()

    assert root.size == 120 + 80 + 500 + 700 + 5000 + 4500
    lines = root.render()
    assert lines[0] == "Folder: root (Total: 10900 KB)"
    assert "    File: resume.pdf (120 KB)" in lines


# =============================================================================
# DECORATOR
# =============================================================================


def test_decorators_stack():
    decorated = decorator_conceptual.ConcreteDecoratorB(
        decorator_conceptual.ConcreteDecoratorA(decorator_conceptual.ConcreteComponent())
    )

    assert decorated.operation() == "ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent))"


def test_message_transformations():
    text = "Hello, World!"
    reversed_message = message_transformation.ReverseTextDecorator(message_transformation.Message())
    uppercase = message_transformation.UppercaseDecorator(reversed_message)
    encrypted = message_transformation.EncryptionDecorator(uppercase)

    assert reversed_message.get_text(text) == "!dlroW ,olleH"
    assert uppercase.get_text(text) == "!DLROW ,OLLEH"
    assert encrypted.get_text(text) == "!QYEBJ ,BYYRU"


def test_plain_text_filter_strips_tags():
    safe = text_filtering.PlainTextFilter(text_filtering.TextInput())

    output = safe.format_text(text_filtering.DANGEROUS_COMMENT)

    assert "<" not in output
    assert "homepage" in output


def test_dangerous_html_filter_drops_scripts_and_handlers():
    sanitizer = text_filtering.DangerousHTMLTagsFilter(text_filtering.TextInput())

    output = sanitizer.format_text('<a onclick="steal()" href="/">x</a><script>evil()</script>')

    assert "<script" not in output
    assert "onclick" not in output
    assert 'href="/"' in output


def test_markdown_then_sanitize_forum_post():
    formatter = text_filtering.DangerousHTMLTagsFilter(
        text_filtering.MarkdownFormat(text_filtering.TextInput())
    )

    output = formatter.format_text(text_filtering.DANGEROUS_FORUM_POST)

    assert "<h1>Welcome</h1>" in output
    assert "<strong>gorgeous</strong>" in output
    assert "performXSSAttack" not in output


# =============================================================================
# FACADE
# =============================================================================


def test_smart_home_routines(capsys):
    facade = smart_home.SmartHomeFacade()
    facade.start_morning_routine()
    facade.start_night_routine()

    out = capsys.readouterr().out
    assert "Setting temperature to 22 °C..." in out
    assert "Setting temperature to 18 °C..." in out
    assert out.index("Deactivating the security system") < out.index("Activating the security system")


def test_meal_order_facade(capsys):
    meal_order.main()
    out = capsys.readouterr().out

    assert "Preparing the meal: Pizza Margherita..." in out
    assert "Processing payment of $20.50..." in out
    assert "Delivering Pizza Margherita to 123 Main St..." in out


# =============================================================================
# FLYWEIGHT
# =============================================================================


def test_flyweight_factory_reuses_shared_state(capsys):
    factory = flyweight_conceptual.FlyweightFactory([["BMW", "M5", "red"]])

    first = factory.get_flyweight(["red", "BMW", "M5"])
    factory.get_flyweight(["BMW", "X1", "red"])

    assert first is factory.get_flyweight(["BMW", "M5", "red"])
    assert len(factory) == 2


def test_flyweight_conceptual_main(capsys):
    flyweight_conceptual.main()
    out = capsys.readouterr().out

    assert "I have 5 flyweights" in out
    assert "I have 6 flyweights" in out
    assert "Reusing existing flyweight." in out


def test_cat_database_shares_variations(capsys):
    db = cat_features.CatDataBase()

    assert db.load_csv(settings.cats_csv_path) == 8
    assert len(db.variations) == 5

    bob = db.find_cat({"name": "Bob"})
    fluffy = db.find_cat({"name": "Fluffy"})
    assert bob.variation is fluffy.variation


def test_cat_database_queries(capsys):
    db = cat_features.CatDataBase()
    db.load_csv(settings.cats_csv_path)

    assert db.find_cat({"name": "Siri"}).name == "Siri"
    assert db.find_cat({"name": "Nobody"}) is None
    assert db.find_cat({"whiskers": "long"}) is None


def test_cat_database_missing_csv(tmp_path):
    with pytest.raises(NotFoundError):
        cat_features.CatDataBase().load_csv(tmp_path / "missing.csv")


def test_forest_shares_tree_types():
    forest = forest_simulation.Forest(forest_simulation.TreeFactory())
    first = forest.plant_tree(0, 0, "Oak", "green", "rough")
    second = forest.plant_tree(5, 5, "Oak", "green", "rough")
    forest.plant_tree(1, 1, "Birch", "white", "smooth")

    assert first.type is second.type
    assert forest.distinct_types() == 2


# =============================================================================
# PROXY
# =============================================================================


def test_proxy_checks_access_and_delegates(capsys):
    proxy_conceptual.client_code(proxy_conceptual.Proxy(proxy_conceptual.RealSubject()))

    assert capsys.readouterr().out.splitlines() == [
        "Proxy: Checking access prior to firing a real request.",
        "RealSubject: Handling request.",
        "Proxy: Logging the time of request.",
    ]


def test_image_proxy_loads_lazily_once(capsys):
    proxy = image_proxy.ProxyImage("photo.jpg")
    assert not proxy.loaded

    proxy.display()
    proxy.display()

    out = capsys.readouterr().out
    assert proxy.loaded
    assert out.count("Loading image: photo.jpg") == 1
    assert out.count("Displaying image: photo.jpg") == 2
