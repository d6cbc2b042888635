"""Registry of the boto3 services the factory knows how to build."""
import boto3


class ClientService:
    """A low-level boto3 client."""

    def __init__(self, name, service_name):
        self.name = name
        self.service_name = service_name

    def build(self, options):
        return boto3.client(self.service_name, **options)

    def unwrap(self, instance):
        return instance

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, {self.service_name!r})"


class ResourceService(ClientService):
    """A document-style boto3 resource wrapping a low-level client."""

    def build(self, options):
        return boto3.resource(self.service_name, **options)

    def unwrap(self, instance):
        return instance.meta.client


# short name -> descriptor
SERVICES = {
    service.name: service
    for service in [
        ClientService("s3", "s3"),
        ClientService("dynamodb", "dynamodb"),
        ResourceService("documentclient", "dynamodb"),
        ClientService("dynamodbstreams", "dynamodbstreams"),
        ClientService("iam", "iam"),
        ClientService("iot", "iot"),
        ClientService("sts", "sts"),
        ClientService("sns", "sns"),
        ClientService("sqs", "sqs"),
        ClientService("ses", "ses"),
        ClientService("kms", "kms"),
        ClientService("lambda", "lambda"),
        ClientService("iotdata", "iot-data"),
        ClientService("xray", "xray"),
        ClientService("apigateway", "apigateway"),
        ClientService("cloudwatch", "cloudwatch"),
        ClientService("cloudwatchlogs", "logs"),
        ClientService("cloudformation", "cloudformation"),
    ]
}


def unwrap(instance):
    """Return the low-level client behind an instance with no known descriptor.

    Anything carrying ``meta.client`` is treated as a resource.
    """
    meta = getattr(instance, "meta", None)
    client = getattr(meta, "client", None)
    return client if client is not None else instance
