# dashboard/serializers.py
from rest_framework import serializers


class AdminProfileSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.EmailField()


class BookingOverviewSerializer(serializers.Serializer):
    pending_count = serializers.IntegerField()
    pending_label = serializers.CharField()
    confirmed_count = serializers.IntegerField()
    turf_count = serializers.IntegerField()
    recent_pending = serializers.ListField(child=serializers.DictField())


class RevenueSerializer(serializers.Serializer):
    estimated_revenue = serializers.IntegerField()
    display_revenue = serializers.CharField()


class DashboardSerializer(serializers.Serializer):
    profile = AdminProfileSerializer()
    bookings = BookingOverviewSerializer()
    revenue = RevenueSerializer()
