from django.db import models
from django.test import SimpleTestCase, override_settings

from rail_fields.entity import EntityDto, get_model_properties
from rail_fields.exceptions import PropertyMetadataError


class Publisher(models.Model):
    name = models.CharField(max_length=100)

    class Meta:
        app_label = "test_entity_dto"


class Book(models.Model):
    title = models.CharField(max_length=200)
    subtitle = models.CharField(max_length=200, null=True, blank=True)
    publisher = models.ForeignKey(
        Publisher, on_delete=models.CASCADE, related_name="books"
    )
    cover = models.ImageField(upload_to="covers", blank=True)
    co_publishers = models.ManyToManyField(Publisher, related_name="co_published")

    class Meta:
        app_label = "test_entity_dto"


class TestEntityDto(SimpleTestCase):
    def test_model_instance_properties(self):
        book = Book(title="Dune")
        entity = EntityDto.from_instance(book)

        self.assertIs(entity.get_instance(), book)
        self.assertEqual(entity.name, "test_entity_dto.Book")
        self.assertTrue(entity.has_property("title"))
        self.assertTrue(entity.has_property("publisher"))
        self.assertTrue(entity.has_property("publisher_id"))
        self.assertFalse(entity.has_property("summary"))

    def test_reverse_relations_are_not_properties(self):
        properties = get_model_properties(Publisher)

        self.assertIn("name", properties)
        self.assertNotIn("books", properties)
        self.assertNotIn("co_published", properties)

    def test_property_metadata(self):
        entity = EntityDto.from_instance(Book())

        self.assertFalse(entity.get_property_metadata("title")["nullable"])
        self.assertTrue(entity.get_property_metadata("subtitle")["nullable"])
        self.assertTrue(entity.get_property_metadata("co_publishers")["nullable"])

        cover = entity.get_property_metadata("cover")
        self.assertEqual(cover["field_type"], "ImageField")
        self.assertEqual(cover["type"], "image")

    def test_camel_case_names_resolve_to_fields(self):
        entity = EntityDto.from_instance(Book())

        self.assertTrue(entity.has_property("coPublishers"))
        self.assertTrue(entity.get_property_metadata("coPublishers")["nullable"])

    def test_snake_case_fallback_can_be_disabled(self):
        entity = EntityDto.from_instance(Book())

        with override_settings(RAIL_FIELDS={"properties": {"snake_case_fallback": False}}):
            self.assertFalse(entity.has_property("coPublishers"))
            self.assertTrue(entity.has_property("co_publishers"))

        self.assertTrue(entity.has_property("coPublishers"))
        self.assertFalse(
            EntityDto(Book(), metadata={"co_publishers": {}}, snake_case_fallback=False)
            .has_property("coPublishers")
        )

    def test_unknown_property_metadata_raises(self):
        entity = EntityDto.from_instance(Book())

        with self.assertRaises(PropertyMetadataError) as ctx:
            entity.get_property_metadata("summary")

        self.assertEqual(ctx.exception.property_name, "summary")
        self.assertIn("test_entity_dto.Book", str(ctx.exception))

    def test_from_model_has_no_instance(self):
        entity = EntityDto.from_model(Book)

        self.assertIsNone(entity.get_instance())
        self.assertTrue(entity.has_property("title"))

    def test_explicit_metadata_for_plain_objects(self):
        row = {"sku": "A-1"}
        entity = EntityDto(row, metadata={"sku": {"nullable": False}}, name="Row")

        self.assertTrue(entity.has_property("sku"))
        self.assertFalse(entity.get_property_metadata("sku")["nullable"])
        self.assertEqual(entity.get_property_names(), ["sku"])
        self.assertEqual(repr(entity), "<EntityDto Row>")
