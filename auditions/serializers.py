"""
Serializers for auditions. camelCase keys; times as HH:MM:SS.
"""
from rest_framework import serializers

from auditions.models import AuditionDate, AuditionSlot

TIME_INPUT_FORMATS = ['%H:%M:%S', '%H:%M', 'iso-8601']


class AuditionSlotSerializer(serializers.ModelSerializer):
    auditionDateId = serializers.UUIDField(source='audition_date_id', read_only=True)
    slotTime = serializers.TimeField(source='slot_time', read_only=True)
    memberId = serializers.IntegerField(source='member_id', read_only=True, allow_null=True)

    class Meta:
        model = AuditionSlot
        fields = ['id', 'auditionDateId', 'slotTime', 'memberId', 'status', 'notes']
        read_only_fields = fields


class AuditionDateSerializer(serializers.ModelSerializer):
    programYearId = serializers.IntegerField(source='program_year_id', read_only=True)
    startTime = serializers.TimeField(source='start_time', read_only=True)
    endTime = serializers.TimeField(source='end_time', read_only=True)
    blockLengthMinutes = serializers.IntegerField(source='block_length_minutes', read_only=True)
    slots = AuditionSlotSerializer(many=True, read_only=True)

    class Meta:
        model = AuditionDate
        fields = ['id', 'programYearId', 'date', 'startTime', 'endTime', 'blockLengthMinutes', 'slots']
        read_only_fields = fields


class PublicAuditionSlotSerializer(serializers.ModelSerializer):
    """Public projection: never exposes claimant or notes."""
    slotTime = serializers.TimeField(source='slot_time', read_only=True)
    isAvailable = serializers.BooleanField(source='is_available', read_only=True)

    class Meta:
        model = AuditionSlot
        fields = ['id', 'slotTime', 'isAvailable']
        read_only_fields = fields


class PublicAuditionDateSerializer(serializers.ModelSerializer):
    startTime = serializers.TimeField(source='start_time', read_only=True)
    endTime = serializers.TimeField(source='end_time', read_only=True)
    blockLengthMinutes = serializers.IntegerField(source='block_length_minutes', read_only=True)
    slots = PublicAuditionSlotSerializer(many=True, read_only=True)

    class Meta:
        model = AuditionDate
        fields = ['id', 'date', 'startTime', 'endTime', 'blockLengthMinutes', 'slots']
        read_only_fields = fields


class CreateAuditionDateSerializer(serializers.Serializer):
    """
    Shape only. Range and divisibility rules live in auditions.services so
    they are reported under startTime / blockLengthMinutes.
    """
    programYearId = serializers.IntegerField()
    date = serializers.DateField()
    startTime = serializers.TimeField(input_formats=TIME_INPUT_FORMATS)
    endTime = serializers.TimeField(input_formats=TIME_INPUT_FORMATS)
    blockLengthMinutes = serializers.IntegerField()


class SlotStatusSerializer(serializers.Serializer):
    status = serializers.CharField(allow_blank=True)


class SlotNotesSerializer(serializers.Serializer):
    notes = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)


class SignUpSerializer(serializers.Serializer):
    """Shape only. Emptiness, length and format are checked by the service after slot state."""
    firstName = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    lastName = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
    email = serializers.CharField(required=False, allow_blank=True, allow_null=True, default='')
