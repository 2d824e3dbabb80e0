"""
Domain layer - course payments.

Pure business rules with no framework dependencies:
- entities/: PaymentIntent, Enrollment, Certificate
- value_objects/: OrderId, TransactionSignal
- signature.py: gateway notification signature check
- errors.py: error kinds and domain exceptions
"""
