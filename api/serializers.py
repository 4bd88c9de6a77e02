from rest_framework import serializers
from base import Constants
from base.enums import ROLE, CATEGORY, GROUPING
from base.models import *

"""
Serializers for the corresponding models.
Model serializers render instances as JSON; the plain serializers validate
request bodies and query params before they reach a service.
"""

def strict_date(**kwargs):
    return serializers.DateField(input_formats=[Constants.DATE_FORMAT], **kwargs)


class UserModelSerializer(serializers.ModelSerializer):
    class Meta:
        model = UserModel
        fields = ["username", "name", "surname", "role", "address", "birthdate"]


class CreateUserSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=255)
    name = serializers.CharField(max_length=255)
    surname = serializers.CharField(max_length=255)
    password = serializers.CharField(write_only=True)
    role = serializers.ChoiceField(choices=[role.value for role in ROLE])


class UpdateUserSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    surname = serializers.CharField(max_length=255)
    address = serializers.CharField(max_length=255)
    birthdate = strict_date()


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True)


class ProductModelSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductModel
        fields = ["model", "category", "quantity", "details", "sellingPrice", "arrivalDate"]


class RegisterProductSerializer(serializers.Serializer):
    model = serializers.CharField(max_length=255)
    category = serializers.ChoiceField(choices=[category.value for category in CATEGORY])
    quantity = serializers.IntegerField(min_value=1)
    details = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)
    sellingPrice = serializers.FloatField()
    arrivalDate = strict_date(required=False, allow_null=True, default=None)

    def validate_sellingPrice(self, value):
        if value <= 0:
            raise serializers.ValidationError("Ensure this value is greater than 0.")
        return value


class ChangeQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)
    changeDate = strict_date(required=False, allow_null=True, default=None)


class SellProductSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)
    sellingDate = strict_date(required=False, allow_null=True, default=None)


class ProductFilterSerializer(serializers.Serializer):
    """
    Query params of the product listings. Which combinations are allowed is
    decided by ProductService, this only checks the individual values.
    """
    grouping = serializers.ChoiceField(choices=[grouping.value for grouping in GROUPING], required=False)
    category = serializers.ChoiceField(choices=[category.value for category in CATEGORY], required=False)
    model = serializers.CharField(required=False)


class ProductInCartSerializer(serializers.ModelSerializer):
    model = serializers.CharField(source="product_id", read_only=True)
    price = serializers.FloatField(source="sellingPrice", read_only=True)

    class Meta:
        model = ProductInCartModel
        fields = ["model", "quantity", "category", "price"]


class CartModelSerializer(serializers.ModelSerializer):
    customer = serializers.CharField(source="customer_id", read_only=True)
    products = serializers.SerializerMethodField()

    class Meta:
        model = CartModel
        fields = ["customer", "paid", "paymentDate", "total", "products"]

    def get_products(self, obj):
        # the empty cart handed out before the first add is never saved
        if obj._state.adding:
            return []
        return ProductInCartSerializer(obj.products.all(), many=True).data


class AddToCartSerializer(serializers.Serializer):
    model = serializers.CharField(max_length=255)


class ReviewModelSerializer(serializers.ModelSerializer):
    model = serializers.CharField(source="product_id", read_only=True)
    user = serializers.CharField(source="user_id", read_only=True)

    class Meta:
        model = ReviewModel
        fields = ["model", "user", "score", "date", "comment"]


class AddReviewSerializer(serializers.Serializer):
    score = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField()
