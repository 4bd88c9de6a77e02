from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from api.permissions import IsCustomer, IsAdminOrManager
from api.serializers import AddReviewSerializer, ReviewModelSerializer
from api.services import ReviewService

class ReviewViewSet(viewsets.ViewSet):
    review_service = ReviewService()

    def get_permissions(self):
        if self.action in ["create", "destroy"]:
            return [IsCustomer()]
        if self.action in ["destroy_product_reviews", "destroy_all"]:
            return [IsAdminOrManager()]

        return [IsAuthenticated()]

    def create(self, request, model=None):
        """
        Review a product.
        POST /api/reviews/{model}
        Body:
        {
            "score": integer in [1, 5],
            "comment": string
        }
        """
        serializer = AddReviewSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        self.review_service.add_review(model, request.user, **serializer.validated_data)
        return Response(status=status.HTTP_200_OK)

    def list(self, request, model=None):
        """
        GET /api/reviews/{model}
        """
        reviews = self.review_service.get_product_reviews(model)
        return Response(ReviewModelSerializer(reviews, many=True).data)

    def destroy(self, request, model=None):
        """
        Delete the authenticated customer's review of a product.
        DELETE /api/reviews/{model}
        """
        self.review_service.delete_review(model, request.user)
        return Response(status=status.HTTP_200_OK)

    def destroy_product_reviews(self, request, model=None):
        """
        DELETE /api/reviews/{model}/all
        """
        self.review_service.delete_reviews_of_product(model)
        return Response(status=status.HTTP_200_OK)

    def destroy_all(self, request):
        """
        DELETE /api/reviews
        """
        self.review_service.delete_all_reviews()
        return Response(status=status.HTTP_200_OK)
