from django.db import models


class TimeStampedModel(models.Model):
    """Horodatage commun a toutes les lignes du site."""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class SortableModel(models.Model):
    sort_order = models.IntegerField(default=0)

    class Meta:
        abstract = True
