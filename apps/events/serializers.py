from rest_framework import serializers

from .models import CheckIn


class CheckInInputSerializer(serializers.Serializer):
    qr_code = serializers.CharField(max_length=100)


class CheckInSerializer(serializers.ModelSerializer):
    eventId = serializers.UUIDField(source='event_id', read_only=True)
    eventName = serializers.CharField(source='event.name', read_only=True)
    timestamp = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = CheckIn
        fields = ['id', 'eventId', 'eventName', 'timestamp']
        read_only_fields = fields


class CheckInResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    eventName = serializers.CharField()
    tokens = serializers.IntegerField()
    checkIn = CheckInSerializer()
