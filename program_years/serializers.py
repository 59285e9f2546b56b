"""
Serializers for program years
"""
from rest_framework import serializers

from program_years.models import ProgramYear


class ProgramYearSerializer(serializers.ModelSerializer):
    startDate = serializers.DateField(source='start_date', read_only=True)
    endDate = serializers.DateField(source='end_date', read_only=True)
    isCurrent = serializers.BooleanField(source='is_current', read_only=True)
    isArchived = serializers.BooleanField(source='is_archived', read_only=True)

    class Meta:
        model = ProgramYear
        fields = ['id', 'name', 'startDate', 'endDate', 'isCurrent', 'isArchived']
        read_only_fields = fields


class ProgramYearWriteSerializer(serializers.Serializer):
    """Create / update body: {name, startDate, endDate}"""
    name = serializers.CharField(max_length=100)
    startDate = serializers.DateField()
    endDate = serializers.DateField()
