from rest_framework import serializers


class ParseMessageSerializer(serializers.Serializer):
    message = serializers.CharField(max_length=500)


class DrinkIntentSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    drink = serializers.CharField()
    options = serializers.DictField()
