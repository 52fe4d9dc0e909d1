# core package: configuration, logging and the shared Adyen client
