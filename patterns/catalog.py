"""
Registry of every runnable example.

Each entry points at a module exposing ``main()``. The slug is
``<pattern>.<example>``, e.g. ``command.document_processing``.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from domain.enums import PatternGroup


@dataclass(frozen=True)
class CatalogEntry:
    group: PatternGroup
    package: str
    pattern: str
    example: str
    title: str
    summary: str = ""

    @property
    def slug(self) -> str:
        return f"{self.package}.{self.example}"

    @property
    def module(self) -> str:
        return f"patterns.{self.group.value}.{self.package}.{self.example}"


C, S, B = PatternGroup.CREATIONAL, PatternGroup.STRUCTURAL, PatternGroup.BEHAVIORAL

_ENTRIES: List[Tuple[PatternGroup, str, str, str, str, str]] = [
    # creational
    (C, "abstract_factory", "Abstract Factory", "conceptual", "Conceptual example",
     "Two factories produce matching A/B product variants."),
    (C, "abstract_factory", "Abstract Factory", "database_connection", "Database connections",
     "MySQL and PostgreSQL connection/query families."),
    (C, "abstract_factory", "Abstract Factory", "notification_services", "Notification services",
     "Gmail and Yahoo email + SMS families."),
    (C, "abstract_factory", "Abstract Factory", "ui_components", "UI components",
     "Windows and Mac buttons and checkboxes."),
    (C, "abstract_factory", "Abstract Factory", "web_template", "Web templates",
     "Twig-style vs PHP-style templates with matching renderers."),
    (C, "builder", "Builder", "conceptual", "Conceptual example",
     "Director-driven and custom builds of the same product."),
    (C, "builder", "Builder", "computer_assembly", "Computer assembly",
     "Gaming and office computers from the same build steps."),
    (C, "builder", "Builder", "sql_query_builder", "SQL query builder",
     "Fluent SELECT/WHERE/LIMIT for MySQL and PostgreSQL."),
    (C, "builder", "Builder", "meal_plan", "Meal plan",
     "Standard and vegetarian meal plans."),
    (C, "factory_method", "Factory Method", "conceptual", "Conceptual example",
     "Creators whose subclasses choose the product."),
    (C, "factory_method", "Factory Method", "notification_system", "Notification system",
     "Email and SMS senders with a shared connect/send/disconnect cycle."),
    (C, "factory_method", "Factory Method", "payment_gateway", "Payment gateway",
     "PayPal and Stripe processors."),
    (C, "factory_method", "Factory Method", "social_network", "Social network",
     "Posting to Facebook and LinkedIn."),
    (C, "prototype", "Prototype", "conceptual", "Conceptual example",
     "Shallow vs deep copies and back references."),
    (C, "prototype", "Prototype", "document", "Document cloning",
     "Cloned documents get a new title and timestamp."),
    (C, "prototype", "Prototype", "complex_page", "Complex page",
     "Cloned pages keep the author but drop comments."),
    (C, "prototype", "Prototype", "shape_cloning", "Shape cloning",
     "Independent circle and rectangle clones."),
    (C, "singleton", "Singleton", "conceptual", "Conceptual example",
     "Two lookups return the same instance."),
    (C, "singleton", "Singleton", "app_settings", "Application settings",
     "Shared application settings."),
    (C, "singleton", "Singleton", "cache_manager", "Cache manager",
     "One process-wide cache."),
    (C, "singleton", "Singleton", "database_connection", "Database connection",
     "One shared connection."),
    (C, "singleton", "Singleton", "global_logging", "Global logging",
     "Logger and config singletons."),
    # structural
    (S, "adapter", "Adapter", "conceptual", "Conceptual example",
     "Adapting an incompatible adaptee to the target interface."),
    (S, "adapter", "Adapter", "currency_converter", "Currency converter",
     "A rate API adapted to the converter interface."),
    (S, "adapter", "Adapter", "paypal_payment", "PayPal payment",
     "PayPal login/payment behind a pay() interface."),
    (S, "bridge", "Bridge", "conceptual", "Conceptual example",
     "Abstractions combined with interchangeable implementations."),
    (S, "bridge", "Bridge", "drawing_tool", "Drawing tool",
     "Shapes drawn by vector or raster renderers."),
    (S, "bridge", "Bridge", "device_controller", "Device controller",
     "Remote controls driving televisions and radios."),
    (S, "bridge", "Bridge", "payment_system", "Payment system",
     "Online and in-store payments over PayPal and Stripe."),
    (S, "composite", "Composite", "conceptual", "Conceptual example",
     "Leaves and branches treated uniformly."),
    (S, "composite", "Composite", "file_system", "File system",
     "Files and folders with recursive sizes."),
    (S, "decorator", "Decorator", "conceptual", "Conceptual example",
     "Stacked decorators around a component."),
    (S, "decorator", "Decorator", "message_transformation", "Message transformation",
     "Reverse, uppercase and ROT13 decorators."),
    (S, "decorator", "Decorator", "text_filtering", "Text filtering",
     "HTML stripping, sanitising and Markdown formatting."),
    (S, "facade", "Facade", "conceptual", "Conceptual example",
     "A facade driving two subsystems."),
    (S, "facade", "Facade", "smart_home", "Smart home",
     "Morning and night routines."),
    (S, "facade", "Facade", "meal_order", "Meal order",
     "Restaurant, payment and delivery behind one call."),
    (S, "flyweight", "Flyweight", "conceptual", "Conceptual example",
     "Shared car state in a police database."),
    (S, "flyweight", "Flyweight", "cat_features", "Cat features",
     "Cat variations shared across records loaded from CSV."),
    (S, "flyweight", "Flyweight", "forest_simulation", "Forest simulation",
     "Tree types shared across planted trees."),
    (S, "proxy", "Proxy", "conceptual", "Conceptual example",
     "Access checks and logging around a real subject."),
    (S, "proxy", "Proxy", "image_proxy", "Image proxy",
     "Lazy image loading."),
    # behavioral
    (B, "chain_of_responsibility", "Chain of Responsibility", "conceptual", "Conceptual example",
     "Animals handling the food they like."),
    (B, "chain_of_responsibility", "Chain of Responsibility", "customer_support", "Customer support",
     "Support tiers escalating issues."),
    (B, "chain_of_responsibility", "Chain of Responsibility", "order_validation", "Order validation",
     "Item, payment and shipping checks."),
    (B, "command", "Command", "conceptual", "Conceptual example",
     "Simple and receiver-backed commands run by an invoker."),
    (B, "command", "Command", "home_automation", "Home automation",
     "Undoable commands for lights, thermostat and security."),
    (B, "command", "Command", "document_processing", "Document processing",
     "Document commands worked through the SQLite queue."),
    (B, "command", "Command", "web_scraping", "Web scraping",
     "A crawl driven by commands that enqueue more commands."),
    (B, "iterator", "Iterator", "csv_iterator", "CSV iterator",
     "Iterating the rows of data/cats.csv."),
    (B, "iterator", "Iterator", "book_collection", "Book collection",
     "An explicit iterator over books."),
    (B, "iterator", "Iterator", "user_collection", "User collection",
     "A generator-based iterator over users."),
    (B, "mediator", "Mediator", "event_dispatcher", "Event dispatcher",
     "Components talking through a central dispatcher."),
    (B, "memento", "Memento", "game_character", "Game character",
     "Saving and restoring character progress."),
    (B, "memento", "Memento", "text_editor", "Text editor",
     "Undo history for an editor."),
    (B, "observer", "Observer", "user_repository", "User repository",
     "Observers subscribed to repository events."),
    (B, "observer", "Observer", "weather_station", "Weather station",
     "Displays updated by a weather station."),
    (B, "state", "State", "order_state", "Order state",
     "An order moving through its lifecycle."),
    (B, "strategy", "Strategy", "conceptual", "Conceptual example",
     "Ascending and descending sort strategies."),
    (B, "strategy", "Strategy", "notification_service", "Notification service",
     "Email, SMS and push notification strategies."),
    (B, "strategy", "Strategy", "payment_method", "Payment method",
     "Credit card and PayPal payment strategies."),
]

EXAMPLES: Dict[str, CatalogEntry] = {}
for _group, _package, _pattern, _example, _title, _summary in _ENTRIES:
    _entry = CatalogEntry(_group, _package, _pattern, _example, _title, _summary)
    EXAMPLES[_entry.slug] = _entry
