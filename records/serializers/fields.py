import base64

import bleach
from rest_framework import serializers


class CleanCharField(serializers.CharField):
    """CharField that strips any HTML markup from the submitted text."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return bleach.clean(value, tags=set(), strip=True)


class BlobField(serializers.FileField):
    """Multipart file stored as raw bytes and rendered as base64."""

    def to_internal_value(self, data):
        upload = super().to_internal_value(data)
        return upload.read()

    def to_representation(self, value):
        if not value:
            return None
        return base64.b64encode(bytes(value)).decode('ascii')


def optional_text(max_length=None, **kwargs):
    return serializers.CharField(max_length=max_length, required=False, allow_blank=True, **kwargs)


def optional_clean_text(max_length=None, **kwargs):
    return CleanCharField(max_length=max_length, required=False, allow_blank=True, **kwargs)
