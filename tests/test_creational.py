"""
Tests for the creational pattern examples.

Each example is exercised through its classes and through main(), checking the
facts the demo is meant to show rather than exact console wording.
"""

import copy

import pytest

from app.exceptions import ServiceValidationError
from patterns.creational.abstract_factory import (
    conceptual as af_conceptual,
    database_connection,
    notification_services,
    ui_components,
    web_template,
)
from patterns.creational.builder import (
    computer_assembly,
    conceptual as builder_conceptual,
    meal_plan,
    sql_query_builder,
)
from patterns.creational.factory_method import (
    conceptual as fm_conceptual,
    notification_system,
    payment_gateway,
    social_network,
)
from patterns.creational.prototype import (
    complex_page,
    conceptual as proto_conceptual,
    document,
    shape_cloning,
)
from patterns.creational.singleton import (
    app_settings,
    cache_manager,
    conceptual as singleton_conceptual,
    database_connection as singleton_db,
    global_logging,
)


# =============================================================================
# ABSTRACT FACTORY
# =============================================================================


def test_abstract_factory_products_collaborate_within_family():
    factory = af_conceptual.ConcreteFactory2()
    a = factory.create_product_a()
    b = factory.create_product_b()

    assert b.another_useful_function_b(a) == (
        "The result of the B2 collaborating with the (The result of the product A2.)"
    )


def test_abstract_factory_conceptual_main(capsys):
    af_conceptual.main()
    out = capsys.readouterr().out

    assert "The result of the product B1." in out
    assert "The result of the product B2." in out


@pytest.mark.parametrize(
    "factory, engine",
    [(database_connection.MySQLFactory(), "MySQL"), (database_connection.PostgreSQLFactory(), "PostgreSQL")],
)
def test_database_factories_name_their_engine(factory, engine):
    assert engine in factory.create_connection().connect()
    assert factory.create_query().execute("SELECT 1") == f"Executing {engine} query: SELECT 1"


def test_notification_factories_send_through_provider():
    gmail = notification_services.GmailFactory()
    yahoo = notification_services.YahooFactory()

    assert gmail.create_email_notification().send("hi") == "Sending email via Gmail: hi"
    assert yahoo.create_sms_notification().send("hi") == "Sending SMS via Yahoo: hi"


def test_ui_factories_render_matching_widgets():
    mac = ui_components.MacFactory()

    assert mac.create_button().render() == "Rendering Mac button."
    assert mac.create_checkbox().render() == "Rendering Mac checkbox."
    assert ui_components.WindowsFactory().create_checkbox().toggle() == "Toggling Windows checkbox."


@pytest.mark.parametrize(
    "factory", [web_template.TwigTemplateFactory(), web_template.PHPTemplateFactory()]
)
def test_web_templates_substitute_values(factory):
    html = web_template.Page("Sample page", "This is the body.").render(factory)

    assert "<h1>Sample page</h1>" in html
    assert '<article class="content">This is the body.</article>' in html
    assert "{{" not in html and "<?=" not in html


# =============================================================================
# BUILDER
# =============================================================================


def test_builder_product_property_resets_builder():
    builder = builder_conceptual.ConcreteBuilder1()
    director = builder_conceptual.Director()
    director.builder = builder

    director.build_full_featured_product()
    assert builder.product.parts == ["PartA1", "PartB1", "PartC1"]

    director.build_minimal_viable_product()
    assert builder.product.parts == ["PartA1"]


def test_builder_conceptual_main(capsys):
    builder_conceptual.main()
    out = capsys.readouterr().out

    assert "Product parts: PartA1, PartB1, PartC1" in out
    assert "Product parts: PartA1, PartC1" in out


def test_gaming_and_office_computers():
    director = computer_assembly.Director()

    gaming = director.build_gaming_computer(computer_assembly.GamingComputerBuilder())
    office = director.build_office_computer(computer_assembly.OfficeComputerBuilder())

    assert gaming.parts == {
        "CPU": "Intel i9",
        "RAM": "32GB",
        "Storage": "1TB SSD",
        "GraphicsCard": "NVIDIA RTX 3090",
    }
    assert office.parts["CPU"] == "Intel i5"
    assert office.parts["GraphicsCard"] == "Integrated GPU"


def test_sql_builder_dialects_render_limit_differently():
    mysql = sql_query_builder.client_code(sql_query_builder.MysqlQueryBuilder())
    postgres = sql_query_builder.client_code(sql_query_builder.PostgresQueryBuilder())

    assert mysql == (
        "SELECT name, email, password FROM users WHERE age > '18' AND age < '30' LIMIT 10, 20;"
    )
    assert postgres.endswith("LIMIT 10 OFFSET 20;")


def test_sql_builder_rejects_where_without_select():
    with pytest.raises(ServiceValidationError):
        sql_query_builder.MysqlQueryBuilder().where("age", "18")


def test_sql_builder_select_resets_previous_query():
    builder = sql_query_builder.MysqlQueryBuilder()
    builder.select("users", ["name"]).where("age", "18", ">")

    assert builder.select("posts", ["title"]).get_sql() == "SELECT title FROM posts;"


def test_meal_plans():
    director = meal_plan.MealPlanDirector()

    standard = director.build_full_meal(meal_plan.StandardMealPlanBuilder())
    vegetarian = director.build_full_meal(meal_plan.VegetarianMealPlanBuilder())

    assert (standard.main_course, standard.side_dish, standard.dessert) == (
        "Steak",
        "French Fries",
        "Ice Cream",
    )
    assert (vegetarian.main_course, vegetarian.side_dish, vegetarian.dessert) == (
        "Vegetarian Burger",
        "Salad",
        "Fruit Salad",
    )


# =============================================================================
# FACTORY METHOD
# =============================================================================


def test_factory_method_creators_choose_product():
    assert "ConcreteProduct2" in fm_conceptual.ConcreteCreator2().some_operation()


def test_notification_sender_runs_full_cycle(capsys):
    notification_system.SMSNotificationSender("+123456789").send_notification("hi")

    assert capsys.readouterr().out.splitlines() == [
        "Connecting to SMS service for +123456789...",
        "Sending SMS to +123456789: hi",
        "Disconnecting from SMS service...",
    ]


def test_payment_gateway_main(capsys):
    payment_gateway.main()
    out = capsys.readouterr().out

    assert "Connecting to PayPal using user_paypal..." in out
    assert "Paying $100.50 via PayPal..." in out
    assert "Connecting to Stripe with API key stripe_api_key..." in out
    assert "Paying $200.75 via Stripe..." in out


def test_social_network_posts_twice_per_network(capsys):
    social_network.main()
    out = capsys.readouterr().out

    assert out.count("create a post in Facebook timeline") == 2
    assert out.count("create a post in LinkedIn timeline") == 2
    assert out.count("log out user john_smith\n") == 2


# =============================================================================
# PROTOTYPE
# =============================================================================


def test_prototype_shallow_and_deep_copies():
    ref = proto_conceptual.SelfReferencingEntity()
    component = proto_conceptual.SomeComponent(1, [1, {1}], ref)
    ref.set_parent(component)

    shallow = copy.copy(component)
    deep = copy.deepcopy(component)

    assert shallow.some_list_of_objects[1] is component.some_list_of_objects[1]
    assert deep.some_list_of_objects[1] is not component.some_list_of_objects[1]
    assert deep.some_circular_ref.parent is deep


def test_prototype_conceptual_main(capsys):
    proto_conceptual.main()

    assert "linked to the clone. Yay!" in capsys.readouterr().out


def test_document_clone_keeps_author():
    author = document.Author("Jane Doe")
    original = document.Document("Design Patterns", "Learning.", author)

    clone = original.clone()

    assert clone.title == "Copy of Design Patterns"
    assert clone.author is author
    assert author.documents == [original, clone]
    assert clone.created_at >= original.created_at


def test_complex_page_clone_drops_comments():
    author = complex_page.Author("John Smith")
    page = complex_page.Page("Tip of the day", "Keep calm and carry on.", author)
    page.add_comment("Nice tip, thanks!")

    draft = page.clone()

    assert draft.title == "Copy of Tip of the day"
    assert draft.comments == []
    assert page.comments == ["Nice tip, thanks!"]
    assert len(author.pages) == 2


def test_shape_clone_is_independent():
    circle = shape_cloning.Circle(10)
    circle.set_color("Red")

    clone = circle.clone()
    clone.set_color("Blue")

    assert circle.draw() == "Drawing a circle with radius 10 and color Red"
    assert clone.draw() == "Drawing a circle with radius 10 and color Blue"


# =============================================================================
# SINGLETON
# =============================================================================


def test_singleton_get_instance_returns_same_object(capsys):
    assert singleton_conceptual.Singleton.get_instance() is singleton_conceptual.Singleton()

    singleton_conceptual.main()
    assert "both variables contain the same instance" in capsys.readouterr().out


def test_singletons_are_per_class():
    assert cache_manager.CacheManager.get_instance() is not app_settings.AppSettings.get_instance()


def test_app_settings_update_visible_everywhere(capsys):
    app_settings.main()
    out = capsys.readouterr().out

    assert "App Name: My Application" in out
    assert "Updated Version: 1.0.1" in out
    assert app_settings.AppSettings.get_instance().get("version") == "1.0.1"


def test_cache_manager_shares_entries():
    cache_manager.CacheManager.get_instance().set("user_1", {"name": "John Doe"})

    assert cache_manager.CacheManager().get("user_1") == {"name": "John Doe"}


def test_database_connection_singleton(capsys):
    singleton_db.main()
    out = capsys.readouterr().out

    assert out.count("Database Connection Established") == 1
    assert "Only one instance of DatabaseConnection exists." in out


def test_global_logging_respects_configured_level(capsys):
    config = global_logging.Config.get_instance()
    config.set_value("log_level", "WARNING")
    try:
        assert global_logging.log("quiet") is False
        assert global_logging.log("loud", "ERROR") is True
    finally:
        config.set_value("log_level", "INFO")

    out = capsys.readouterr().out
    assert "quiet" not in out
    assert "[ERROR]: loud" in out
