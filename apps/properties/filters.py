"""FilterSet definitions for property listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Property


class PropertyFilterSet(django_filters.FilterSet):
    """FilterSet for Property with the filters used by the listing pages."""

    city = django_filters.CharFilter(field_name="city", lookup_expr="icontains")
    state = django_filters.CharFilter(field_name="state", lookup_expr="iexact")
    status = django_filters.ChoiceFilter(field_name="status", choices=Property.Status.choices)
    listing_type = django_filters.ChoiceFilter(field_name="listing_type", choices=Property.ListingType.choices)

    price_min = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    bedrooms_min = django_filters.NumberFilter(field_name="bedrooms", lookup_expr="gte")

    # CSV of features, requires all of them
    features = django_filters.CharFilter(method="filter_features")

    class Meta:
        model = Property
        fields = [
            "city",
            "state",
            "status",
            "listing_type",
        ]

    def filter_features(self, queryset, name, value):  # type: ignore
        wanted = [item.strip().lower() for item in str(value).split(",") if item.strip()]
        if not wanted:
            return queryset
        # JSON containment lookups are not portable across backends, filter in Python
        matching_ids = [
            prop_id
            for prop_id, features in queryset.values_list("id", "features")
            if set(wanted) <= {str(f).lower() for f in (features or [])}
        ]
        return queryset.filter(id__in=matching_ids)
