from aws_cdk import (
    Stack,
    aws_lambda as lambda_,
    aws_apigateway as apigateway,
    Duration,
    CfnOutput,
    BundlingOptions
)
from constructs import Construct

# Must stay below the Lambda timeout so a stalled upstream still gets a response
RETRIEVAL_TIMEOUT_SECONDS = 5


class EventDetailsStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Lambda Layer for Python dependencies
        self.dependencies_layer = lambda_.LayerVersion(
            self,
            "DependenciesLayer",
            code=lambda_.Code.from_asset(
                "../",
                bundling=BundlingOptions(
                    image=lambda_.Runtime.PYTHON_3_11.bundling_image,
                    command=[
                        "bash", "-c",
                        "pip install -r requirements.txt -t /asset-output/python"
                    ]
                )
            ),
            compatible_runtimes=[lambda_.Runtime.PYTHON_3_11],
            description="FastAPI, Mangum, Pydantic, Requests"
        )

        # Lambda Function for the event details endpoint
        self.api_lambda = lambda_.Function(
            self,
            "EventDetailsLambda",
            function_name="EventDetails-ApiHandler",
            runtime=lambda_.Runtime.PYTHON_3_11,
            handler="event_details.main.handler",
            code=lambda_.Code.from_asset("../src"),
            layers=[self.dependencies_layer],
            timeout=Duration.seconds(RETRIEVAL_TIMEOUT_SECONDS + 5),
            memory_size=256,
            environment={
                "EVENT_DETAILS_RETRIEVAL_TIMEOUT_SECONDS": str(RETRIEVAL_TIMEOUT_SECONDS),
                "EVENT_DETAILS_LOG_LEVEL": "INFO"
            }
        )

        # API Gateway REST API
        self.api = apigateway.LambdaRestApi(
            self,
            "EventDetailsApi",
            handler=self.api_lambda,
            proxy=True,  # Forward all requests to Lambda
            rest_api_name="Event Details API",
            description="Read-only disaster event details",
            deploy_options=apigateway.StageOptions(
                stage_name="prod"
            ),
            default_cors_preflight_options=apigateway.CorsOptions(
                allow_origins=apigateway.Cors.ALL_ORIGINS,
                allow_methods=["GET", "OPTIONS"]
            )
        )

        # Outputs
        CfnOutput(
            self,
            "ApiLambdaArn",
            value=self.api_lambda.function_arn,
            description="API Lambda function ARN"
        )

        CfnOutput(
            self,
            "ApiUrl",
            value=self.api.url,
            description="API Gateway endpoint URL"
        )
