from django.db import models


class Author(models.Model):
    name = models.CharField(max_length=100)
    email = models.EmailField(blank=True)
    active = models.BooleanField(default=True)
    born = models.DateField(null=True, blank=True)

    class Meta:
        app_label = "tests"

    class GraphQLMeta:
        filterable = ["name", "active"]


class Tag(models.Model):
    label = models.CharField(max_length=50)

    class Meta:
        app_label = "tests"

    class GraphQLMeta:
        filterable = {"label": "true"}


class Book(models.Model):
    title = models.CharField(max_length=200, help_text="Title of the book")
    isbn = models.CharField(max_length=13)
    pages = models.PositiveIntegerField(default=0)
    price = models.DecimalField(max_digits=8, decimal_places=2, default=0)
    rating = models.FloatField(default=0)
    published_at = models.DateTimeField(null=True, blank=True)
    internal_notes = models.TextField(blank=True)
    author = models.ForeignKey(Author, related_name="books", on_delete=models.CASCADE)
    metadata = models.JSONField(default=dict)
    tags = models.ManyToManyField(Tag, related_name="books")

    class Meta:
        app_label = "tests"

    class GraphqlMeta:
        filterable = {
            "title": "true",
            "pages": "1",
            "rating": True,
            "published_at": "yes",
            "isbn": "false",
        }
        names = {"title": "Headline,omitempty", "internal_notes": "-"}


class Review(models.Model):
    book = models.ForeignKey(Book, on_delete=models.CASCADE)
    reviewer = models.ForeignKey(Author, related_name="reviews", on_delete=models.CASCADE)
    score = models.SmallIntegerField()

    class Meta:
        app_label = "tests"


class Attachment(models.Model):
    name = models.CharField(max_length=100)
    payload = models.BinaryField()

    class Meta:
        app_label = "tests"


class Shelf(models.Model):
    code = models.CharField(max_length=10)

    class Meta:
        app_label = "tests"

    class GraphQLMeta:
        names = {"code": "shelf-code"}


class Notice(models.Model):
    body = models.TextField()
    title = models.CharField(max_length=100)

    class Meta:
        app_label = "tests"

    class GraphQLMeta:
        names = {"body": "from", "title": ",omitempty"}


class Class(models.Model):
    name = models.CharField(max_length=100)

    class Meta:
        app_label = "tests"
