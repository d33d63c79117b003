from django import forms
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.forms import UserChangeForm, UserCreationForm
from rest_framework import serializers

from .identity import get_identity_provider
from .models import AdminAllowlist, User
from .validators import normalize_whatsapp_number


class PlayerCreationForm(UserCreationForm):
    class Meta:
        model = User
        fields = ("email", "full_name", "phone_number")

    def clean_phone_number(self):
        value = self.cleaned_data.get("phone_number", "")
        if not value:
            return ""
        try:
            return normalize_whatsapp_number(value)
        except serializers.ValidationError as exc:
            raise forms.ValidationError(exc.detail) from exc


class PlayerChangeForm(UserChangeForm):
    class Meta:
        model = User
        fields = "__all__"


# ----------------------------------
# PLAYERS
# ----------------------------------
@admin.register(User)
class UserAdmin(BaseUserAdmin):
    form = PlayerChangeForm
    add_form = PlayerCreationForm

    list_display = ("email", "full_name", "phone_number", "booking_admin", "created_at")
    list_filter = ("is_active",)
    search_fields = ("email", "full_name", "phone_number")
    ordering = ("-created_at",)
    readonly_fields = ("created_at", "last_login")

    fieldsets = (
        (None, {"fields": ("email", "password")}),
        ("Contact", {"fields": ("full_name", "phone_number")}),
        ("Access", {"fields": ("is_active", "is_staff", "is_superuser")}),
        ("Activity", {"fields": ("last_login", "created_at")}),
    )
    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": ("email", "full_name", "phone_number", "password1", "password2"),
        }),
    )

    def get_queryset(self, request):
        self._identity = get_identity_provider()
        return super().get_queryset(request)

    @admin.display(boolean=True, description="Booking admin")
    def booking_admin(self, obj):
        identity = getattr(self, "_identity", None) or get_identity_provider()
        return identity.is_admin_email(obj.email)


# ----------------------------------
# ADMIN ALLOWLIST (SINGLE RECORD)
# ----------------------------------
@admin.register(AdminAllowlist)
class AdminAllowlistAdmin(admin.ModelAdmin):
    list_display = ("id", "email_count", "updated_at")

    @admin.display(description="E-mails")
    def email_count(self, obj):
        return len(obj.emails or [])

    def has_add_permission(self, request):
        return not AdminAllowlist.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False
