from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    # officer username or email
    identifier = serializers.CharField(max_length=254)
    password = serializers.CharField(write_only=True, trim_whitespace=False)


class RefreshSerializer(serializers.Serializer):
    refresh_token = serializers.CharField()
