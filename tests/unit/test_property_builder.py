from django.db import models
from django.test import RequestFactory, SimpleTestCase

from rail_fields.context import ApplicationContextMiddleware
from rail_fields.entity import EntityDto
from rail_fields.properties.builder import PropertyBuilder, get_property_builder
from rail_fields.properties.config import Action, PropertyConfig
from rail_fields.properties.configurators import CommonConfigurator, PropertyConfigurator


class Invoice(models.Model):
    number = models.CharField(max_length=20, verbose_name="Invoice number")
    total = models.DecimalField(max_digits=10, decimal_places=2, null=True)
    notes = models.TextField(blank=True, help_text="Internal notes")

    class Meta:
        app_label = "test_property_builder"

    def is_paid(self):
        return False


class Tag(models.Model):
    name = models.CharField(max_length=50)

    class Meta:
        app_label = "test_property_builder"


class Quote(models.Model):
    title = models.CharField(max_length=100)
    tags = models.ManyToManyField(Tag, related_name="quotes")

    class Meta:
        app_label = "test_property_builder"


class RecordingConfigurator(PropertyConfigurator):
    def __init__(self, tag, priority=0, supported=True, calls=None):
        self.tag = tag
        self.priority = priority
        self.supported = supported
        self.calls = calls if calls is not None else []

    def supports(self, property_config, entity_dto):
        return self.supported

    def configure(self, action, property_config, entity_dto):
        self.calls.append((self.tag, action, property_config.css_class))
        return property_config.with_options(
            css_class=f"{property_config.css_class} {self.tag}".strip()
        )


class TestPropertyBuilder(SimpleTestCase):
    def setUp(self):
        self.entity = EntityDto.from_instance(Invoice(number="F-001"))

    def test_configurators_run_by_priority(self):
        calls = []
        builder = PropertyBuilder(
            [
                RecordingConfigurator("low", priority=-10, calls=calls),
                RecordingConfigurator("high", priority=10, calls=calls),
                RecordingConfigurator("default", calls=calls),
            ]
        )

        config = builder.build(Action.INDEX, PropertyConfig(name="number"), self.entity)

        self.assertEqual([call[0] for call in calls], ["high", "default", "low"])
        self.assertEqual(config.css_class, "high default low")
        self.assertEqual(calls[0][1], Action.INDEX)

    def test_unsupported_configurators_are_skipped(self):
        calls = []
        builder = PropertyBuilder(
            [
                RecordingConfigurator("skipped", supported=False, calls=calls),
                RecordingConfigurator("used", calls=calls),
            ]
        )

        config = builder.build("edit", PropertyConfig(name="number"), self.entity)

        self.assertEqual(calls, [("used", "edit", "")])
        self.assertEqual(config.css_class, "used")

    def test_add_configurator_keeps_priority_order(self):
        builder = PropertyBuilder([RecordingConfigurator("a", priority=1)])
        builder.add_configurator(RecordingConfigurator("b", priority=5))
        builder.add_configurator(RecordingConfigurator("c", priority=1))

        self.assertEqual([c.tag for c in builder.configurators], ["b", "a", "c"])

    def test_build_all(self):
        builder = PropertyBuilder([RecordingConfigurator("x")])

        configs = builder.build_all(
            Action.DETAIL,
            [PropertyConfig(name="number"), PropertyConfig(name="total")],
            self.entity,
        )

        self.assertEqual([c.name for c in configs], ["number", "total"])
        self.assertTrue(all(c.css_class == "x" for c in configs))

    def test_default_builder_configures_model_properties(self):
        invoice = Invoice(number="F-002", total=None, notes="")
        builder = get_property_builder()

        self.assertIsInstance(builder.configurators[0], CommonConfigurator)

        configs = {
            config.name: config
            for config in builder.build_model_properties(
                Action.DETAIL, invoice, ["number", "total", "notes", "is_paid"]
            )
        }

        number = configs["number"]
        self.assertEqual(number.label, "Invoice number")
        self.assertEqual(number.value, "F-002")
        self.assertTrue(number.required)
        self.assertEqual(number.template_path, "rail_fields/crud/property/text.html")

        total = configs["total"]
        self.assertEqual(total.label, "Total")
        self.assertEqual(total.type, "decimal")
        self.assertFalse(total.required)
        self.assertEqual(total.template_path, "rail_fields/crud/label/null.html")

        notes = configs["notes"]
        self.assertEqual(notes.help, "Internal notes")
        self.assertEqual(notes.template_path, "rail_fields/crud/property/textarea.html")

        is_paid = configs["is_paid"]
        self.assertEqual(is_paid.label, "Is paid")
        self.assertIs(is_paid.value, False)
        self.assertTrue(is_paid.virtual)
        self.assertFalse(is_paid.sortable)
        self.assertFalse(is_paid.required)

    def test_model_properties_default_to_every_field(self):
        configs = get_property_builder().build_model_properties(
            Action.INDEX, Invoice(number="F-003")
        )

        self.assertEqual(
            [config.name for config in configs], ["id", "number", "total", "notes"]
        )
        self.assertEqual(configs[0].template_path, "rail_fields/crud/label/null.html")

    def test_builder_uses_request_context(self):
        request = RequestFactory().get("/admin/invoices/")
        ApplicationContextMiddleware(lambda r: None).process_request(request)

        config = get_property_builder(request).build(
            Action.DETAIL,
            PropertyConfig(name="number", template_name="property/text"),
            self.entity,
        )

        self.assertEqual(config.label, "Number")
        self.assertEqual(config.value, "F-001")

    def test_unsaved_instance_with_many_to_many_field(self):
        configs = {
            config.name: config
            for config in get_property_builder().build_model_properties(
                Action.NEW, Quote(title="Spring offer")
            )
        }

        self.assertEqual(list(configs), ["id", "title", "tags"])
        self.assertEqual(configs["title"].value, "Spring offer")

        tags = configs["tags"]
        self.assertIsNone(tags.value)
        self.assertFalse(tags.virtual)
        self.assertFalse(tags.required)
        self.assertEqual(
            tags.template_path, "rail_fields/crud/label/inaccessible.html"
        )

    def test_unsaved_instance_reverse_relations_are_not_readable(self):
        tag = Tag(name="seasonal")

        config = get_property_builder().build(
            Action.NEW,
            PropertyConfig(name="quotes", template_name="property/association"),
            EntityDto.from_instance(tag),
        )

        self.assertIsNone(config.value)
        self.assertTrue(config.virtual)
        self.assertEqual(
            config.template_path, "rail_fields/crud/label/inaccessible.html"
        )
